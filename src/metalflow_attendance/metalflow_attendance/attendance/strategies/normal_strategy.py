from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftConfig
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in."""

    def decide_checkin(self, *, now: datetime, shift: ShiftConfig) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
