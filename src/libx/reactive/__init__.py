from __future__ import annotations

from .action import action, batch, in_batch
from .observable import ChangeKind, Listener, ListChange, ObservableList

__all__ = [
    "ChangeKind",
    "ListChange",
    "Listener",
    "ObservableList",
    "action",
    "batch",
    "in_batch",
]
