from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...common.datetime_utils import at_time_of_day, hours_between, overlap_hours
from ...common.validators import require_time_range
from ...shifts.model import LunchConfig
from .base import HoursCalculator


def compute_net_hours(
    check_in: datetime,
    check_out: Optional[datetime],
    lunch: LunchConfig,
    *,
    record_id: Optional[str] = None,
) -> float:
    """Worked hours between check-in and check-out minus the lunch overlap.

    The lunch window is anchored to the check-in's calendar day. An open
    record (no check-out) counts as 0 hours. A check-out before the
    check-in raises ``ValidationError``.
    """
    if check_out is None:
        return 0.0
    require_time_range(check_in, check_out, record_id=record_id)

    gross = hours_between(check_in, check_out)
    overlap = overlap_hours(
        check_in,
        check_out,
        at_time_of_day(check_in, lunch.lunch_start),
        at_time_of_day(check_in, lunch.lunch_end),
    )
    return max(0.0, gross - overlap)


class LunchBreakHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - overlap with the lunch window, not below 0."""

    def __init__(self, lunch: Optional[LunchConfig] = None):
        self._lunch = lunch or LunchConfig()

    def net_hours(self, check_in: datetime, check_out: Optional[datetime]) -> float:
        return compute_net_hours(check_in, check_out, self._lunch)
