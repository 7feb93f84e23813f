from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import DailyStatus
from .model import AttendanceRecord


def latest_record_for(employee_id: str, records: Iterable[AttendanceRecord]) -> Optional[AttendanceRecord]:
    """Most recently created record of ``employee_id`` among ``records``.

    Duplicates for one day can come from retries or manual edits; the
    newest one wins. Ties on creation time keep the later list position.
    """
    latest: Optional[AttendanceRecord] = None
    for record in records:
        if record.employee_id != employee_id:
            continue
        if latest is None or record.created_key >= latest.created_key:
            latest = record
    return latest


def project_daily_status(employee_id: str, todays_records: Iterable[AttendanceRecord]) -> DailyStatus:
    record = latest_record_for(employee_id, todays_records)
    if record is None:
        return DailyStatus.PENDING
    if record.is_open:
        return DailyStatus.WORKING
    return DailyStatus.COMPLETED
