from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

import pytest

from libx import collection, configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def library_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("libx")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_attaches_handler_to_library_logger(
    library_logger: logging.Logger,
) -> None:
    stream = io.StringIO()
    root_handlers = list(logging.getLogger().handlers)

    logger = configure_logging(level=logging.DEBUG, stream=stream)
    collection().set({"id": 1})

    assert logger is library_logger
    assert logger.level == logging.DEBUG
    assert logging.getLogger().handlers == root_handlers
    assert "DEBUG [libx.domain.collection] Created item 1" in stream.getvalue()


def test_configure_logging_is_idempotent_unless_forced(library_logger: logging.Logger) -> None:
    first, second = io.StringIO(), io.StringIO()

    configure_logging(stream=first)
    configure_logging(level=logging.WARNING, stream=second)

    assert len(library_logger.handlers) == 1
    assert library_logger.level == logging.WARNING

    configure_logging(level=logging.DEBUG, stream=second, force=True)
    logging.getLogger("libx.domain.collection").debug("rerouted")

    assert len(library_logger.handlers) == 1
    assert "rerouted" in second.getvalue()
    assert "rerouted" not in first.getvalue()


def test_reconciliation_decisions_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    people = collection()

    with caplog.at_level(logging.DEBUG, logger="libx.domain.collection"):
        people.set({"id": 1})
        people.set({"id": 1, "name": "x"})
        people.set({"name": "no id"})

    messages = [record.getMessage() for record in caplog.records]
    assert "Created item 1" in messages
    assert "Updated item 1" in messages
    assert "Skipping record without 'id'" in messages


def test_rejected_record_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    people = collection()

    with caplog.at_level(logging.WARNING), pytest.raises(TypeError):
        people.set({"id": None})

    assert any(record.levelno == logging.WARNING for record in caplog.records)
