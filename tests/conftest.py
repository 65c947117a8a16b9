from __future__ import annotations

from typing import Any

import pytest

from libx import Collection, collection
from tests.helpers.people import ChangeRecorder


@pytest.fixture
def people() -> Collection[dict[str, Any]]:
    return collection()


@pytest.fixture
def recorder() -> ChangeRecorder[Any]:
    return ChangeRecorder()
