from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} no válido")
    return value.strip()


def require_choice(value, enum_cls: type[E], field_name: str) -> E:
    """Coerce a raw value into a member of ``enum_cls`` or fail validation."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"{field_name} no válido: {value}")


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} debe ser un número")
    if number < 1:
        raise ValidationError(f"{field_name} debe ser mayor o igual a 1")
    return number
