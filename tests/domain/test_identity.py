from __future__ import annotations

from datetime import UTC, date, datetime
from uuid import UUID

import pytest

from libx import MISSING, is_model_id, normalize_id


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("abc", "abc"),
        (42, "42"),
        (-7, "-7"),
        (3.0, "3"),
        (2.5, "2.5"),
        (date(2024, 2, 29), "2024-02-29"),
        (datetime(2024, 2, 29, 12, 30, tzinfo=UTC), "2024-02-29T12:30:00+00:00"),
        (
            UUID("12345678-1234-5678-1234-567812345678"),
            "12345678-1234-5678-1234-567812345678",
        ),
    ],
)
def test_normalize_id_produces_canonical_strings(value: object, expected: str) -> None:
    assert normalize_id(value) == expected


def test_int_float_and_string_forms_collide() -> None:
    assert normalize_id(1) == normalize_id(1.0) == normalize_id("1")


def test_is_model_id_separates_identifiers_from_items() -> None:
    assert is_model_id("a")
    assert is_model_id(0)
    assert is_model_id(1.5)
    assert is_model_id(date(2024, 1, 1))
    assert is_model_id(UUID(int=1))

    assert not is_model_id(True)
    assert not is_model_id(None)
    assert not is_model_id({"id": 1})
    assert not is_model_id([1, 2])


def test_missing_sentinel_is_falsy_singleton() -> None:
    assert not MISSING
    assert MISSING is not None
    assert repr(MISSING) == "MISSING"
