"""Single-pass query helpers over ordered iterables.

Iteratees may take ``(item)`` or ``(item, index)``; the index is only passed
when the callable accepts a second positional argument.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

type Iteratee[T, R] = Callable[[T], R] | Callable[[T, int], R]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _wants_index(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without introspectable signatures, e.g. ``bool``
        return False
    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in _POSITIONAL:
            positional += 1
    return positional >= 2


def _call(func: Callable[..., Any], item: object, index: int, *, with_index: bool) -> Any:
    if with_index:
        return func(item, index)
    return func(item)


def _indexed_results[T](
    items: Iterable[T], iteratee: Callable[..., Any]
) -> Iterator[tuple[T, Any]]:
    with_index = _wants_index(iteratee)
    for index, item in enumerate(items):
        yield item, _call(iteratee, item, index, with_index=with_index)


def map_items[T, R](items: Iterable[T], iteratee: Iteratee[T, R]) -> list[R]:
    return [result for _, result in _indexed_results(items, iteratee)]


def filter_items[T](items: Iterable[T], predicate: Iteratee[T, object]) -> list[T]:
    return [item for item, keep in _indexed_results(items, predicate) if keep]


def find_item[T](items: Iterable[T], predicate: Iteratee[T, object]) -> T | None:
    """Return the first item matching ``predicate``, or None."""

    return next((item for item, match in _indexed_results(items, predicate) if match), None)


def some_items[T](items: Iterable[T], predicate: Iteratee[T, object]) -> bool:
    return any(match for _, match in _indexed_results(items, predicate))
