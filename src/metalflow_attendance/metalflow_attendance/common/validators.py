from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_time_range(
    check_in: datetime,
    check_out: Optional[datetime],
    *,
    record_id: Optional[str] = None,
) -> None:
    """Check-out, when present, may not come before check-in."""
    if check_out is not None and check_out < check_in:
        raise ValidationError(
            f"check-out {check_out.isoformat()} is before check-in {check_in.isoformat()}",
            record_id=record_id,
        )
