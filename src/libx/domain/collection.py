"""Identity-indexed, observable collection with upsert-by-id semantics.

``Collection.set`` reconciles plain records against the items already held:
records whose identifier matches an existing item are merged into it in place,
all others are turned into new items and appended. Items are looked up by a
linear scan comparing the canonical string form of their identifiers.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Unpack, overload

from libx.common.sequence_ops import filter_items, find_item, map_items, some_items
from libx.reactive import ObservableList, action

from .errors import InvalidIdError
from .identity import MISSING, is_model_id, normalize_id
from .options import resolve_options

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from typing import Self

    from libx.common.sequence_ops import Iteratee
    from libx.reactive import Listener

    from .identity import ModelId
    from .options import CollectionOptions, OptionsLayer, OptionsOverride, Record

log = getLogger(__name__)


class Collection[T]:
    """An ordered, observable list of items keyed by an extracted identifier.

    Item identity is by reference: updating an item never replaces it, and
    ``add``/``remove`` compare items with ``is``. Every mutating method runs as
    a single action, so subscribers are notified once per call.
    """

    def __init__(
        self,
        options: OptionsLayer[T] = None,
        **overrides: Unpack[OptionsOverride],
    ) -> None:
        self._options: CollectionOptions[T] = resolve_options(options, overrides)
        self._items: ObservableList[T] = ObservableList()

    @property
    def items(self) -> ObservableList[T]:
        """The live backing sequence."""
        return self._items

    @property
    def options(self) -> CollectionOptions[T]:
        return self._options

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return (
            f"Collection(length={len(self._items)}, "
            f"id_attribute={self._options.id_attribute!r})"
        )

    @overload
    def get(self, model_id: list[ModelId] | tuple[ModelId, ...]) -> list[T | None]: ...
    @overload
    def get(self, model_id: ModelId) -> T | None: ...
    def get(
        self, model_id: ModelId | list[ModelId] | tuple[ModelId, ...]
    ) -> T | None | list[T | None]:
        """Return the item with identifier ``model_id``, or None.

        A list or tuple of identifiers yields a list of results in the same order.
        Items whose own identifier is absent or None are never matched; falsy
        identifiers such as ``0`` and ``""`` are ordinary keys.
        """

        if isinstance(model_id, list | tuple):
            return self.get_many(model_id)
        return self._find(normalize_id(model_id), self._options)

    def get_many(self, model_ids: Iterable[ModelId]) -> list[T | None]:
        return [self._find(normalize_id(model_id), self._options) for model_id in model_ids]

    def _find(self, key: str, options: CollectionOptions[T]) -> T | None:
        for item in self._items:
            model_id = options.get_model_id(item, options)
            if model_id is MISSING or model_id is None:
                continue
            if normalize_id(model_id) == key:
                return item
        return None

    @overload
    def set(self, data: None, /, **overrides: Unpack[OptionsOverride]) -> None: ...
    @overload
    def set(
        self,
        data: list[Record] | tuple[Record, ...],
        /,
        **overrides: Unpack[OptionsOverride],
    ) -> list[T | None]: ...
    @overload
    def set(self, data: Record, /, **overrides: Unpack[OptionsOverride]) -> T | None: ...
    @action
    def set(
        self,
        data: Record | list[Record] | tuple[Record, ...] | None,
        /,
        **overrides: Unpack[OptionsOverride],
    ) -> T | None | list[T | None]:
        """Create or update items from ``data``.

        Keyword overrides apply to this call only and take precedence over the
        collection's options. A record whose identifier is ``MISSING`` is skipped
        and yields None; one whose identifier is ``None`` raises
        ``InvalidIdError``. Batches are not rolled back when a record fails.
        """

        if data is None:
            return None
        options = resolve_options(self._options, overrides)
        if isinstance(data, list | tuple):
            return [self._set_one(record, options) for record in data]
        return self._set_one(data, options)

    @action
    def set_many(
        self, records: Iterable[Record], **overrides: Unpack[OptionsOverride]
    ) -> list[T | None]:
        options = resolve_options(self._options, overrides)
        return [self._set_one(record, options) for record in records]

    def _set_one(self, record: Record, options: CollectionOptions[T]) -> T | None:
        data_id = options.get_data_id(record, options)
        if data_id is MISSING:
            log.debug("Skipping record without %r", options.id_attribute)
            return None
        if data_id is None:
            log.warning("Rejecting record with a null %r", options.id_attribute)
            raise InvalidIdError(data_id)

        key = normalize_id(data_id)
        existing = self._find(key, options)
        if existing is not None:
            # update works in place; the stored reference is what callers get back
            options.update(existing, record, options)
            log.debug("Updated item %s", key)
            return existing

        created = options.create(record, options)
        self._items.append(created)
        log.debug("Created item %s", key)
        return created

    @action
    def add(self, models: T | list[T] | tuple[T, ...]) -> Self:
        """Append items that are not already held, keeping their order."""

        batch: list[T] | tuple[T, ...] = models if isinstance(models, list | tuple) else (models,)
        fresh: list[T] = []
        for model in batch:
            if model in self._items or any(seen is model for seen in fresh):
                continue
            fresh.append(model)
        self._items.append(*fresh)
        return self

    @action
    def remove(self, model_or_id: T | ModelId) -> Self:
        """Remove an item, given either the item itself or its identifier."""

        model = self.get(model_or_id) if is_model_id(model_or_id) else model_or_id
        if model is None:
            log.debug("Nothing to remove for %r", model_or_id)
            return self
        self._items.remove(model)
        return self

    @action
    def clear(self) -> Self:
        self._items.clear()
        return self

    def map[R](self, iteratee: Iteratee[T, R]) -> list[R]:
        return map_items(self._items, iteratee)

    def filter(self, predicate: Iteratee[T, object]) -> list[T]:
        return filter_items(self._items, predicate)

    def find(self, predicate: Iteratee[T, object]) -> T | None:
        return find_item(self._items, predicate)

    def some(self, predicate: Iteratee[T, object]) -> bool:
        return some_items(self._items, predicate)

    def slice(self, start: int | None = None, end: int | None = None) -> list[T]:
        return self._items.slice(start, end)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        return self._items.subscribe(listener)


def collection[T](
    options: OptionsLayer[T] = None, **overrides: Unpack[OptionsOverride]
) -> Collection[T]:
    """Create a collection; ``options`` and keyword overrides fill in over the defaults."""

    return Collection(options, **overrides)

