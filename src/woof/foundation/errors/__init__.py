"""Error types for woof configuration helpers."""

from .errors import ConfigurationError, WoofError

__all__ = ["ConfigurationError", "WoofError"]
