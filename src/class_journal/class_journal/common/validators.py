from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    """None and blank strings count as missing; 0 and False do not."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_non_empty(value: Any, field_name: str) -> str:
    if is_missing(value) or not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value.strip()


def require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; JSON true/false is never a valid id or number.
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"{field_name} must be an integer")


def require_fields(data: dict, *names: str) -> None:
    missing = [name for name in names if is_missing(data.get(name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(names)}")
