"""Ordered, observable sequence of items."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, overload

from .action import defer, in_batch

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

log = getLogger(__name__)


class ChangeKind(StrEnum):
    ADD = "add"
    REMOVE = "remove"
    CLEAR = "clear"


@dataclass(frozen=True, slots=True)
class ListChange[T]:
    """One mutation of an observable list, described as a splice at ``index``."""

    kind: ChangeKind
    index: int
    added: tuple[T, ...] = ()
    removed: tuple[T, ...] = ()


type Listener[T] = Callable[[tuple[ListChange[T], ...]], None]


class ObservableList[T](Sequence[T]):
    """A list that reports its mutations to subscribed listeners.

    Reads behave like a read-only sequence. Membership, ``index``, ``index_of``,
    ``count`` and ``remove`` compare by identity, not equality. Each listener
    receives the tuple of changes made since the previous notification: one
    change outside a batch, all of the batch's changes once it closes.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._listeners: list[Listener[T]] = []
        self._buffer: list[ListChange[T]] = []

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return self.index_of(item) != -1

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    def index_of(self, item: object) -> int:
        for index, candidate in enumerate(self._items):
            if candidate is item:
                return index
        return -1

    def index(self, value: object, start: int = 0, stop: int | None = None) -> int:
        for position in range(*slice(start, stop).indices(len(self._items))):
            if self._items[position] is value:
                return position
        raise ValueError(f"{value!r} is not in list")

    def count(self, value: object) -> int:
        return sum(1 for item in self._items if item is value)

    def find(self, predicate: Callable[[T], object]) -> T | None:
        return next((item for item in self._items if predicate(item)), None)

    def slice(self, start: int | None = None, end: int | None = None) -> list[T]:
        """Return a detached copy of ``items[start:end]``."""

        return self._items[start:end]

    def append(self, *items: T) -> int:
        """Append ``items`` in order and return the new length."""

        if items:
            index = len(self._items)
            self._items.extend(items)
            self._record(ListChange(ChangeKind.ADD, index, added=items))
        return len(self._items)

    def remove(self, item: T) -> bool:
        """Remove the first occurrence of ``item``; return whether one was found."""

        index = self.index_of(item)
        if index == -1:
            return False
        del self._items[index]
        self._record(ListChange(ChangeKind.REMOVE, index, removed=(item,)))
        return True

    def clear(self) -> list[T]:
        """Remove every item and return what was removed."""

        removed = self._items
        if not removed:
            return []
        self._items = []
        self._record(ListChange(ChangeKind.CLEAR, 0, removed=tuple(removed)))
        return removed

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register ``listener`` and return a function that unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def flush_changes(self) -> None:
        if not self._buffer:
            return
        changes = tuple(self._buffer)
        self._buffer.clear()
        log.debug("Notifying %d listener(s) of %d change(s)", len(self._listeners), len(changes))
        for listener in list(self._listeners):
            listener(changes)

    def _record(self, change: ListChange[T]) -> None:
        self._buffer.append(change)
        if in_batch():
            defer(self)
        else:
            self.flush_changes()
