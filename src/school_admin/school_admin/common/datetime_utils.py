from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str, field_name: str = "date") -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()
