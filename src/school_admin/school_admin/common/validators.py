from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_list(value: Any, field_name: str) -> list:
    """Accept list/tuple only; strings and scalars are rejected."""
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list")
    return list(value)
