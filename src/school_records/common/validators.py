from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_email(value: Optional[str], field_name: str = "Email") -> Optional[str]:
    if not value:
        return None
    value = value.strip()
    if "@" not in value or value.startswith("@") or value.endswith("@"):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def require_non_negative(value: Any, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_not_in_past(value: Optional[date], field_name: str, *, today: date) -> date:
    if value is None:
        raise ValidationError(f"{field_name} is required")
    if value < today:
        raise ValidationError(f"{field_name} cannot be in the past")
    return value


def require_choice(value: Any, enum_cls, field_name: str):
    """Enum member for ``value``; matching ignores case ('present' -> Present)."""
    try:
        return enum_cls(value)
    except ValueError:
        text = str(value or "").strip().lower()
        for member in enum_cls:
            if member.value.lower() == text:
                return member
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_id(value: Any, field_name: str) -> int:
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a record id")
