"""Service for reading "HHMM" time-of-day strings."""

from __future__ import annotations

import re

_DECIMAL_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_time_value(text: str) -> int | None:
    """Convert a time string to an integer, or ``None`` if it is not numeric.

    Only ASCII decimal digits with an optional sign are accepted. No range
    check is done: "-100" and "9999" parse fine.
    """
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return int(text)
