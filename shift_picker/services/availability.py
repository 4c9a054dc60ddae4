"""Service for building the list of shifts a worker can pick from."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from shift_picker.domain.models import Shift, ShiftOption
from shift_picker.services.conflicts import is_shift_blocked
from shift_picker.services.formatting import format_shift


def list_shift_options(
    user_shifts: Sequence[Shift],
    available_shifts: Iterable[Shift],
) -> list[ShiftOption]:
    """Return a labelled option for every catalog shift.

    Options that overlap one of *user_shifts* are marked disabled. Catalog
    shifts that cannot be formatted are left out.
    """
    options: list[ShiftOption] = []
    for shift in available_shifts:
        label = format_shift(shift)
        if label is None:
            continue
        options.append(
            ShiftOption(
                shift=shift,
                label=label,
                disabled=is_shift_blocked(user_shifts, shift),
            )
        )
    return options
