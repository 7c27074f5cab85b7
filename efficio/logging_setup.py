from __future__ import annotations

import logging
import sys
from typing import Union

from efficio.config_utils import env_str


class _ThirdPartyNoiseFilter(logging.Filter):
    """Let efficio logs through; other libraries only at WARNING and above."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "efficio" or record.name.startswith("efficio."):
            return True
        return record.levelno >= logging.WARNING


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = env_str("EFFICIO_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[int, str, None] = None) -> None:
    """Configure console logging for efficio.

    Call once, early, from the host application. ``level`` defaults to
    EFFICIO_LOG_LEVEL (INFO when unset or unknown).
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    # Remove pre-existing handlers to avoid duplicate lines.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
