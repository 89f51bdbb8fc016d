from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_number(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_range(value, field_name: str, low: float, high: float) -> float:
    number = require_number(value, field_name)
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low:g} and {high:g}")
    return number


def require_non_negative(value, field_name: str) -> float:
    number = require_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


_TRUE_WORDS = {"1", "true", "yes", "on"}


def parse_flag(value, default: bool = False) -> bool:
    """Boolean from JSON or query input; the string "false" is False."""
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return bool(value)
