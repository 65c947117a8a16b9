"""Errors raised while reconciling records."""

from __future__ import annotations


class InvalidIdError(TypeError):
    """Raised when a record's id extractor reports a malformed identifier.

    An extractor returning ``MISSING`` means the record has nothing to reconcile;
    returning ``None`` means the record is broken and is rejected with this error.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"{value} is not a valid ID")
