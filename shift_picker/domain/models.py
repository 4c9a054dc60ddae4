"""Domain models for shift selection."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Shift(BaseModel):
    """A working interval described by two "HHMM" time-of-day strings.

    The strings are deliberately not validated here: malformed values are
    handled by the services, which treat them as non-conflicting and
    unformattable.
    """

    model_config = ConfigDict(frozen=True)

    start: str
    end: str


class ShiftOption(BaseModel):
    """A catalog shift as offered to the worker for selection."""

    model_config = ConfigDict(frozen=True)

    shift: Shift
    label: str
    disabled: bool = False
