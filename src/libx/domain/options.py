"""Collection options: id extraction plus create/update policies.

Options are resolved in three tiers, each overriding the previous one field by
field: the built-in defaults, the options a collection was created with, and the
overrides passed to a single ``set`` call.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Final, TypedDict, cast

from libx.common.config import ConfigurationError, UnknownOptionError

from .identity import MISSING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Self

type Record = Mapping[str, Any]
type CreateFunc[T] = Callable[[Record, CollectionOptions[T]], T]
type UpdateFunc[T] = Callable[[T, Record, CollectionOptions[T]], T]
type ModelIdGetter[T] = Callable[[T, CollectionOptions[T]], object]
type DataIdGetter[T] = Callable[[Record, CollectionOptions[T]], object]

POLICY_FIELDS: Final[tuple[str, ...]] = ("create", "update", "get_model_id", "get_data_id")


def read_id(obj: object, options: CollectionOptions[Any]) -> object:
    """Read ``options.id_attribute`` from a mapping key or an attribute.

    Returns ``MISSING`` when the field is absent and ``None`` when it is present
    but empty.
    """

    name = options.id_attribute
    if isinstance(obj, Mapping):
        return cast(Mapping[str, object], obj).get(name, MISSING)
    return getattr(obj, name, MISSING)


def create_from_record(record: Record, options: CollectionOptions[Any]) -> Any:  # noqa: ARG001
    return record


def merge_record(
    existing: Any,
    record: Record,
    options: CollectionOptions[Any],  # noqa: ARG001
) -> Any:
    """Shallow-merge ``record`` onto ``existing`` in place."""

    if isinstance(existing, MutableMapping):
        cast(MutableMapping[str, object], existing).update(record)
        return existing
    for key, value in record.items():
        setattr(existing, key, value)
    return existing


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectionOptions[T]:
    """Resolved policy bundle used by a collection."""

    id_attribute: str = "id"
    create: CreateFunc[T] = create_from_record
    update: UpdateFunc[T] = merge_record
    get_model_id: ModelIdGetter[T] = read_id
    get_data_id: DataIdGetter[T] = read_id

    def __post_init__(self) -> None:
        if not isinstance(self.id_attribute, str) or not self.id_attribute.strip():
            raise ConfigurationError(
                f"id_attribute must be a non-blank string, got {self.id_attribute!r}"
            )
        for name in POLICY_FIELDS:
            if not callable(getattr(self, name)):
                raise ConfigurationError(f"Option {name!r} must be callable")

    def merged(self, overrides: Mapping[str, object]) -> Self:
        """Return a copy with every non-None entry of ``overrides`` applied."""

        known = {f.name for f in fields(self)}
        unknown = [name for name in overrides if name not in known]
        if unknown:
            raise UnknownOptionError(unknown)
        changes = {name: value for name, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


class OptionsOverride(TypedDict, total=False):
    """A partial options layer; omitted fields fall through to the tier below."""

    id_attribute: str
    create: CreateFunc[Any]
    update: UpdateFunc[Any]
    get_model_id: ModelIdGetter[Any]
    get_data_id: DataIdGetter[Any]


DEFAULT_OPTIONS: Final[CollectionOptions[Any]] = CollectionOptions()

type OptionsLayer[T] = CollectionOptions[T] | Mapping[str, object] | None


def resolve_options[T](*layers: OptionsLayer[T]) -> CollectionOptions[T]:
    """Merge option layers over the defaults, last writer wins per field.

    A ``CollectionOptions`` layer is already complete and replaces everything
    below it; a mapping layer only replaces the fields it names.
    """

    resolved: CollectionOptions[Any] = DEFAULT_OPTIONS
    for layer in layers:
        if layer is None:
            continue
        if isinstance(layer, CollectionOptions):
            resolved = cast("CollectionOptions[Any]", layer)
            continue
        resolved = resolved.merged(layer)
    return cast("CollectionOptions[T]", resolved)
