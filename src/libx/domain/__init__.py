from __future__ import annotations

from .collection import Collection, collection
from .errors import InvalidIdError
from .identity import MISSING, Missing, ModelId, is_model_id, normalize_id
from .options import (
    DEFAULT_OPTIONS,
    CollectionOptions,
    OptionsOverride,
    Record,
    create_from_record,
    merge_record,
    read_id,
    resolve_options,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "MISSING",
    "Collection",
    "CollectionOptions",
    "InvalidIdError",
    "Missing",
    "ModelId",
    "OptionsOverride",
    "Record",
    "collection",
    "create_from_record",
    "is_model_id",
    "merge_record",
    "normalize_id",
    "read_id",
    "resolve_options",
]
