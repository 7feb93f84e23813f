from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def net_hours(self, check_in: datetime, check_out: Optional[datetime]) -> float:
        raise NotImplementedError
