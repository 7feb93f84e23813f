from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import at_time_of_day
from ..shifts.model import ShiftConfig
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on shift cutoffs."""

    def for_checkin(self, *, now: datetime, shift: ShiftConfig) -> AttendanceStrategy:
        cutoff = at_time_of_day(now, shift.cutoff_for(now.time()))
        # Inclusive: arriving exactly at the cutoff is on time.
        if now <= cutoff:
            return NormalStrategy()
        return LateStrategy()
