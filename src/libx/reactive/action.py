"""Batching of change notifications.

Mutations made while a batch is open are buffered by each observable list and
delivered once, when the outermost batch closes. Execution is single-threaded
so the batch state is plain module state.
"""

from __future__ import annotations

import functools
from contextlib import contextmanager
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

log = getLogger(__name__)


class Flushable(Protocol):
    def flush_changes(self) -> None: ...


@dataclass(slots=True)
class _BatchState:
    depth: int = 0
    pending: list[Flushable] = field(default_factory=list[Flushable])


_state = _BatchState()


def in_batch() -> bool:
    return _state.depth > 0


def defer(target: Flushable) -> None:
    """Queue ``target`` to flush when the outermost batch closes."""

    if not any(queued is target for queued in _state.pending):
        _state.pending.append(target)


@contextmanager
def batch() -> Iterator[None]:
    """Coalesce notifications of every mutation made inside the block."""

    _state.depth += 1
    try:
        yield
    finally:
        _state.depth -= 1
        if _state.depth == 0:
            _flush_pending()


def _flush_pending() -> None:
    # every queued list flushes even if a listener raises; the first error wins
    error: Exception | None = None
    while _state.pending:
        targets = list(_state.pending)
        _state.pending.clear()
        for target in targets:
            try:
                target.flush_changes()
            except Exception as exc:
                if error is not None:
                    log.exception("Listener failed while another error was pending")
                    continue
                error = exc
    if error is not None:
        raise error


def action[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Run ``func`` inside a batch."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with batch():
            return func(*args, **kwargs)

    return wrapper
