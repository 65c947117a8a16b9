"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when collection options are invalid."""


class UnknownOptionError(ConfigurationError):
    """Raised when an options layer names a field that does not exist."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Unknown collection options: {', '.join(sorted(names))}")
