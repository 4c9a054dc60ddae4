"""Service for rendering shifts as display strings."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shift_picker.domain.models import Shift
from shift_picker.services.parsing import parse_time_value

logger = logging.getLogger(__name__)

TIME_VALUE_WIDTH = 4
SHIFT_LABEL_SEPARATOR = " - "


def pad_with_leading_zeros(number: int, total_length: int) -> str:
    """Left-pad the decimal form of *number* with zeros to *total_length*.

    Longer values are returned untruncated.
    """
    return str(number).rjust(total_length, "0")


def format_shift(shift: Shift) -> str | None:
    """Render a shift as "HHMM - HHMM", or ``None`` if a boundary is not numeric."""
    start = parse_time_value(shift.start)
    end = parse_time_value(shift.end)
    if start is None or end is None:
        logger.debug("Cannot format shift %r", shift)
        return None

    return SHIFT_LABEL_SEPARATOR.join(
        [
            pad_with_leading_zeros(start, TIME_VALUE_WIDTH),
            pad_with_leading_zeros(end, TIME_VALUE_WIDTH),
        ]
    )


def format_shift_list(shifts: Iterable[Shift]) -> list[str]:
    """Format every shift, skipping the ones that cannot be formatted."""
    labels: list[str] = []
    for shift in shifts:
        label = format_shift(shift)
        if label is not None:
            labels.append(label)
    return labels
