"""Integrations with third-party model libraries."""

from __future__ import annotations

from .pydantic import pydantic_options

__all__ = ["pydantic_options"]
