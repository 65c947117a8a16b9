"""Identifier values and their canonical string form.

Identifiers are compared by string form only, so ``1``, ``1.0`` and ``"1"``
all address the same item.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Final, Literal, TypeGuard
from uuid import UUID

type ModelId = str | int | float | date | datetime | UUID


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING
"""Returned by id extractors when the object carries no identifier at all."""

type Missing = Literal[_Missing.MISSING]


def is_model_id(value: object) -> TypeGuard[ModelId]:
    """Return True if ``value`` is usable as an identifier rather than an item."""

    if isinstance(value, bool):
        return False
    return isinstance(value, str | int | float | date | UUID)


def normalize_id(value: object) -> str:
    """Return the canonical string form of an identifier."""

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, date):
        # datetime is a date subclass; both render as ISO 8601
        return value.isoformat()
    return str(value)
