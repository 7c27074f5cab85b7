from __future__ import annotations

from dataclasses import dataclass

from efficio.config_utils import env_int


@dataclass(frozen=True)
class PrioritySuggestionConfig:
    """Tuning knobs for the priority suggestion rules.

    The defaults reproduce the behaviour users already know from the task
    panel; override them only for experiments.

    Env vars:
    - EFFICIO_SUGGESTION_LIMIT: max suggestions returned (default: 5)
    - EFFICIO_DUE_SOON_DAYS: "due soon" window in days (default: 2)
    - EFFICIO_DUE_WITHIN_WEEK_DAYS: upper bound of the "within a week"
      window in days (default: 7)
    - EFFICIO_DAILY_ROUTINE_LIMIT: daily tasks proposed per run (default: 2)
    """

    limit: int = 5
    due_soon_days: int = 2
    due_within_week_days: int = 7
    daily_routine_limit: int = 2

    @classmethod
    def from_env(cls) -> "PrioritySuggestionConfig":
        due_soon = env_int("EFFICIO_DUE_SOON_DAYS", cls.due_soon_days, minimum=1)
        within_week = env_int("EFFICIO_DUE_WITHIN_WEEK_DAYS", cls.due_within_week_days, minimum=1)

        return cls(
            limit=env_int("EFFICIO_SUGGESTION_LIMIT", cls.limit, minimum=1),
            due_soon_days=due_soon,
            # the week window starts where "due soon" ends
            due_within_week_days=max(due_soon, within_week),
            daily_routine_limit=env_int("EFFICIO_DAILY_ROUTINE_LIMIT", cls.daily_routine_limit, minimum=1),
        )
