"""Exception types raised by woof's configuration helpers.

The logging path itself never raises these: filtering, merging and rendering
are total. They only surface when a level, format or color mode is parsed from
text (environment settings, stdlib bridge options) and the text is unknown.
"""

from __future__ import annotations


class WoofError(Exception):
    """Base class for all woof errors."""


class ConfigurationError(WoofError, ValueError):
    """Unknown level, format or color mode name.
    
    Subclasses ValueError so callers that already guard config parsing with
    ``except ValueError`` keep working.
    """
    
    __slots__ = ("setting", "value")
    
    def __init__(self, setting: str, value: object, choices: tuple[str, ...] = ()) -> None:
        self.setting, self.value = setting, value
        hint = f" (expected one of: {', '.join(choices)})" if choices else ""
        super().__init__(f"Unknown {setting}: {value!r}{hint}")
