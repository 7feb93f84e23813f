from __future__ import annotations

from datetime import datetime

from ..core.enums import AttendanceStatus
from ..shifts.model import ShiftConfig
from .factory import AttendanceStrategyFactory

_factory = AttendanceStrategyFactory()


def classify_check_in(now: datetime, shift: ShiftConfig) -> AttendanceStatus:
    """Present or late for a check-in at ``now``. Never returns absent."""
    strategy = _factory.for_checkin(now=now, shift=shift)
    return strategy.decide_checkin(now=now, shift=shift).status
