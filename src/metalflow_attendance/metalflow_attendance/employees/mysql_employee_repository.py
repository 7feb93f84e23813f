from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeDirectory

_COLUMNS = "id, first_name, last_name, role, status, created_at"


def _to_employee(row: Dict[str, Any]) -> Employee:
    created_at = row.get("created_at")
    return Employee(
        employee_id=str(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        role=row.get("role") or "",
        status=EmployeeStatus(row.get("status") or EmployeeStatus.ACTIVE.value),
        created_at=created_at.isoformat() if created_at else None,
    )


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE status=%s ORDER BY first_name ASC",
                (EmployeeStatus.ACTIVE.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]
