"""Value classification: primitive leaves vs. composite containers."""
from __future__ import annotations

import enum
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

__all__ = ["PRIMITIVE_TYPES", "ValueKind", "canonicalize", "classify", "is_primitive"]

PRIMITIVE_TYPES: tuple[type, ...] = (str, bool, int, float, Decimal, datetime, date)


class ValueKind(enum.Enum):
    PRIMITIVE = "primitive"
    COMPOSITE = "composite"


def is_primitive(value: Any) -> bool:
    return isinstance(value, PRIMITIVE_TYPES)


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of a resolved value.

    ``None`` and other unsupported types raise :class:`TypeError`; callers
    are expected to have filtered out missing values first.
    """
    if isinstance(value, PRIMITIVE_TYPES):
        return ValueKind.PRIMITIVE
    if isinstance(value, (Mapping, list, tuple)):
        return ValueKind.COMPOSITE
    raise TypeError(f"Cannot classify value of type {type(value).__name__}")


def canonicalize(value: Any) -> str:
    """Canonical string form of a primitive, as seen by masks and helpers."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
