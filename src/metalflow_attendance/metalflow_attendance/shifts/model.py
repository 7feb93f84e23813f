from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.constants import (
    DEFAULT_AFTERNOON_CUTOFF,
    DEFAULT_LUNCH_END,
    DEFAULT_LUNCH_START,
    DEFAULT_MORNING_CUTOFF,
    DEFAULT_SPLIT_HOUR,
)
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftConfig:
    """Late cutoffs for a workshop day.

    Check-ins before ``split_hour`` are compared with ``morning_cutoff``,
    the rest with ``afternoon_cutoff``. A check-in exactly at the cutoff
    is on time.
    """

    morning_cutoff: time = DEFAULT_MORNING_CUTOFF
    afternoon_cutoff: time = DEFAULT_AFTERNOON_CUTOFF
    split_hour: int = DEFAULT_SPLIT_HOUR

    def __post_init__(self):
        if not 0 <= self.split_hour <= 24:
            raise ValidationError(f"split_hour must be within 0..24, got {self.split_hour}")

    @classmethod
    def single_cutoff(cls, cutoff: time) -> "ShiftConfig":
        """One shift per day: the same cutoff applies morning and afternoon."""
        return cls(morning_cutoff=cutoff, afternoon_cutoff=cutoff)

    def cutoff_for(self, moment: time) -> time:
        if moment.hour < self.split_hour:
            return self.morning_cutoff
        return self.afternoon_cutoff


@dataclass(frozen=True)
class LunchConfig:
    """Daily lunch window subtracted from worked time."""

    lunch_start: time = DEFAULT_LUNCH_START
    lunch_end: time = DEFAULT_LUNCH_END

    def __post_init__(self):
        if self.lunch_end < self.lunch_start:
            raise ValidationError("lunch_end must not be before lunch_start")
