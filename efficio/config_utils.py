from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() if strip else value


def env_int(name: str, default: int, *, minimum: Optional[int] = None) -> int:
    """Read an integer from the environment.

    Unset or malformed values fall back to ``default``. When ``minimum`` is
    given the result is clamped to it.
    """
    raw = os.environ.get(name)
    value = default
    if raw is not None:
        try:
            value = int(raw.strip())
        except ValueError:
            value = default
    if minimum is not None:
        value = max(minimum, value)
    return value
