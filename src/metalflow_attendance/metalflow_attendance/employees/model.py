from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Workshop employee as supplied by the employee directory."""

    employee_id: str
    first_name: str
    last_name: str
    role: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    @property
    def display_name(self) -> str:
        return f"{self.last_name}, {self.first_name}"
