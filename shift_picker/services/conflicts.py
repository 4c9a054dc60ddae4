"""Service for detecting time overlaps between shifts."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shift_picker.domain.models import Shift
from shift_picker.services.parsing import parse_time_value

logger = logging.getLogger(__name__)


def shifts_conflict(shift_a: Shift, shift_b: Shift) -> bool:
    """Return True if the two shifts overlap.

    All four boundaries are sorted. Non-overlapping shifts always sort as
    [startX, endX, startY, endY], so the two smallest values are one
    shift's own (start, end) pair; anything else is an overlap.

    Shifts that touch (one ends exactly when the other starts) do NOT
    conflict. A boundary that fails to parse makes the pair non-conflicting.
    """
    bounds = [
        parse_time_value(value)
        for value in (shift_a.start, shift_a.end, shift_b.start, shift_b.end)
    ]
    if any(value is None for value in bounds):
        logger.debug("Unparseable shift boundary in %r / %r", shift_a, shift_b)
        return False

    a_start, a_end, b_start, b_end = bounds
    lowest_two = tuple(sorted(bounds)[:2])
    return lowest_two not in ((a_start, a_end), (b_start, b_end))


def is_shift_blocked(existing_shifts: Iterable[Shift], candidate: Shift) -> bool:
    """Return True if *candidate* overlaps any of *existing_shifts*."""
    return any(shifts_conflict(shift, candidate) for shift in existing_shifts)


def find_conflicts(existing_shifts: Iterable[Shift], candidate: Shift) -> list[Shift]:
    """Return existing shifts that overlap with *candidate*, in input order."""
    return [shift for shift in existing_shifts if shifts_conflict(shift, candidate)]
