from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeDirectory(Protocol):
    """Roster source.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError
