from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_fields(data: Mapping[str, Any] | None, fields: Iterable[str]) -> None:
    """Reject payloads missing any of ``fields`` (None, empty string or absent)."""
    if not isinstance(data, Mapping) or not data:
        raise ValidationError("Missing fields")

    missing = [f for f in fields if data.get(f) is None or str(data.get(f)).strip() == ""]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def require_positive_int(value: Any, field_name: str) -> int:
    number = require_int(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def require_time(value: Any, field_name: str) -> time:
    if isinstance(value, time):
        return value
    raw = str(value).strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(raw, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"{field_name} must be a time (HH:MM)")


def require_choice(value: Any, enum_cls, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
