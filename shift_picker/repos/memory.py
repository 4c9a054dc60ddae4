"""In-memory repositories for shifts."""

from __future__ import annotations

from shift_picker.domain.models import Shift
from shift_picker.services.lists import remove_at


class ShiftRepository:
    """List-backed store for Shift instances, kept in insertion order."""

    def __init__(self) -> None:
        self._shifts: list[Shift] = []

    def add(self, shift: Shift) -> None:
        self._shifts.append(shift)

    def list_all(self) -> list[Shift]:
        return list(self._shifts)

    def remove(self, index: int) -> bool:
        """Drop the shift at *index*. Returns False if there is none."""
        remaining = remove_at(index, self._shifts)
        if remaining is None:
            return False
        self._shifts = remaining
        return True


# ---------------------------------------------------------------------------
# Sample shifts: one worker's roster and the company template catalog
# ---------------------------------------------------------------------------

_USER_SHIFTS = [
    ("0600", "1000"),
    ("1600", "2000"),
]

_COMPANY_SHIFTS = [
    ("0000", "2359"),
    ("0600", "1800"),
    ("0000", "1200"),
    ("0600", "1200"),
    ("1800", "2359"),
    ("0000", "0600"),
    ("1200", "2359"),
    ("1200", "1800"),
]


def _seed(repo: ShiftRepository, rows: list[tuple[str, str]]) -> ShiftRepository:
    for start, end in rows:
        repo.add(Shift(start=start, end=end))
    return repo


def create_user_shift_repository() -> ShiftRepository:
    """Return a ShiftRepository pre-loaded with the worker's sample shifts."""
    return _seed(ShiftRepository(), _USER_SHIFTS)


def create_company_shift_repository() -> ShiftRepository:
    """Return a ShiftRepository pre-loaded with the company shift catalog."""
    return _seed(ShiftRepository(), _COMPANY_SHIFTS)
