from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_COLUMNS = "id, employee_id, date, check_in, check_out, status, created_at"


def row_to_record(row: Dict[str, Any]) -> AttendanceRecord:
    try:
        status = AttendanceStatus(row["status"])
    except ValueError as exc:
        raise ValidationError(f"Unknown attendance status {row['status']!r}", record_id=str(row["id"])) from exc
    return AttendanceRecord(
        record_id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        work_date=row["date"],
        check_in=row["check_in"],
        check_out=row.get("check_out"),
        status=status,
        created_at=row.get("created_at"),
    )


def rows_to_records(rows: Iterable[Dict[str, Any]]) -> List[AttendanceRecord]:
    """Convert rows, skipping (and logging) the ones that fail validation."""
    records: List[AttendanceRecord] = []
    for row in rows:
        try:
            records.append(row_to_record(row))
        except ValidationError as exc:
            logger.warning("Skipping malformed attendance row: %s", exc)
    return records


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_logs WHERE id=%s", (record_id,))
            row = fetchone(cur)
            return row_to_record(row) if row else None

    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_logs
                WHERE employee_id=%s
                ORDER BY date DESC, created_at DESC
                LIMIT %s
                """,
                (employee_id, int(limit)),
            )
            return rows_to_records(fetchall(cur))

    def get_for_employee_between(self, employee_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_logs
                WHERE employee_id=%s AND date BETWEEN %s AND %s
                ORDER BY date ASC, check_in ASC
                """,
                (employee_id, start, end),
            )
            return rows_to_records(fetchall(cur))

    def get_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_logs
                WHERE date=%s
                ORDER BY check_in DESC
                """,
                (work_date,),
            )
            return rows_to_records(fetchall(cur))

    def get_between(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_logs
                WHERE date BETWEEN %s AND %s
                ORDER BY date ASC, check_in ASC
                """,
                (start, end),
            )
            return rows_to_records(fetchall(cur))

    def create_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        status: AttendanceStatus,
    ) -> str:
        record_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_logs(id, employee_id, date, check_in, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (record_id, employee_id, work_date, check_in, status.value),
            )
        return record_id

    def update_checkout(self, *, record_id: str, check_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_logs SET check_out=%s WHERE id=%s",
                (check_out, record_id),
            )
            return cur.rowcount > 0

    def update_times(
        self,
        *,
        record_id: str,
        check_in: datetime,
        check_out: Optional[datetime],
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_logs
                SET check_in=%s, check_out=%s, status=%s
                WHERE id=%s
                """,
                (check_in, check_out, status.value, record_id),
            )
            return cur.rowcount > 0

    def delete(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_logs WHERE id=%s", (record_id,))
            return cur.rowcount > 0
