from __future__ import annotations

from importlib import metadata

from .common import ConfigurationError, configure_logging
from .domain import (
    DEFAULT_OPTIONS,
    MISSING,
    Collection,
    CollectionOptions,
    InvalidIdError,
    ModelId,
    OptionsOverride,
    collection,
    is_model_id,
    normalize_id,
    resolve_options,
)
from .reactive import ChangeKind, ListChange, ObservableList, action, batch

try:
    __version__ = metadata.version("libx")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "DEFAULT_OPTIONS",
    "MISSING",
    "ChangeKind",
    "Collection",
    "CollectionOptions",
    "ConfigurationError",
    "InvalidIdError",
    "ListChange",
    "ModelId",
    "ObservableList",
    "OptionsOverride",
    "action",
    "batch",
    "collection",
    "configure_logging",
    "is_model_id",
    "normalize_id",
    "resolve_options",
]
