from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import pandas as pd

from efficio.priority.models import Suggestion

SUGGESTION_COLUMNS = ["task_id", "title", "reason", "suggested_priority", "current_priority"]

WELL_PRIORITIZED_TITLE = "All Good!"
WELL_PRIORITIZED_MESSAGE = "Your tasks are well prioritized"


@dataclass(frozen=True)
class SuggestionSummary:
    title: str
    description: str
    count: int


def summarize(suggestions: Sequence[Suggestion]) -> SuggestionSummary:
    """Headline for a generation; an empty run is the "well prioritized" signal."""
    count = len(suggestions)
    if count == 0:
        return SuggestionSummary(WELL_PRIORITIZED_TITLE, WELL_PRIORITIZED_MESSAGE, 0)
    noun = "suggestion" if count == 1 else "suggestions"
    return SuggestionSummary("AI Priority Suggestions", f"{count} {noun} to review", count)


def suggestions_to_records(suggestions: Iterable[Suggestion]) -> List[dict]:
    return [s.to_dict() for s in suggestions]


def suggestions_to_frame(suggestions: Iterable[Suggestion]) -> pd.DataFrame:
    records = suggestions_to_records(suggestions)
    if not records:
        return pd.DataFrame(columns=SUGGESTION_COLUMNS)
    return pd.DataFrame.from_records(records, columns=SUGGESTION_COLUMNS)
