"""Create/update policies for collections holding pydantic models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Unpack

if TYPE_CHECKING:
    from pydantic import BaseModel

    from libx.domain.options import CollectionOptions, OptionsOverride, Record


def _current_input(existing: BaseModel, record: Record) -> dict[str, Any]:
    """Dump ``existing`` as validation input, minus the fields ``record`` supplies.

    Fields are dumped by alias, the spelling validation accepts by default. A
    field the record names under either spelling is dropped so the record's
    value is the only one validated.
    """

    current = existing.model_dump(by_alias=True)
    for name, info in type(existing).model_fields.items():
        spellings = {name, info.alias or name}
        if not spellings.isdisjoint(record):
            for key in spellings:
                current.pop(key, None)
    return current


def pydantic_options[M: BaseModel](
    model_cls: type[M], **overrides: Unpack[OptionsOverride]
) -> OptionsOverride:
    """Return an options layer that stores records as validated ``model_cls`` instances.

    Updates validate the merge of the current field values and the incoming
    record, then assign the validated values onto the existing instance so the
    item keeps its identity. Invalid records raise ``pydantic.ValidationError``
    before the existing item is touched.
    """

    def create(record: Record, options: CollectionOptions[Any]) -> M:  # noqa: ARG001
        return model_cls.model_validate(record)

    def update(existing: M, record: Record, options: CollectionOptions[Any]) -> M:  # noqa: ARG001
        merged = model_cls.model_validate({**_current_input(existing, record), **record})
        for name in type(merged).model_fields:
            setattr(existing, name, getattr(merged, name))
        for name, value in (merged.model_extra or {}).items():
            setattr(existing, name, value)
        return existing

    layer: OptionsOverride = {"create": create, "update": update}
    layer.update(overrides)
    return layer
