"""Utility functions."""

from .coerce import to_natural_number, to_text, trim
from .http import HTTPClient

__all__ = ["HTTPClient", "to_natural_number", "to_text", "trim"]
