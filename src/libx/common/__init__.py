from __future__ import annotations

from .config import ConfigurationError, UnknownOptionError
from .logging import configure_logging
from .sequence_ops import filter_items, find_item, map_items, some_items

__all__ = [
    "ConfigurationError",
    "UnknownOptionError",
    "configure_logging",
    "filter_items",
    "find_item",
    "map_items",
    "some_items",
]
