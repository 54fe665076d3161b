"""Severity levels and the level filter.

Levels are totally ordered DEBUG < INFO < WARNING < ERROR. The enum value is
the rank, so filtering is a plain integer comparison.
"""

from __future__ import annotations

from enum import IntEnum

from woof.foundation.errors import ConfigurationError


class Level(IntEnum):
    """Log severity. Value doubles as rank for filtering."""
    
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


# Short uppercase tags used by Text/Compact output (WARNING shortens to WARN)
_TAGS: dict[Level, str] = {Level.DEBUG: "DEBUG", Level.INFO: "INFO", Level.WARNING: "WARN", Level.ERROR: "ERROR"}
_NAMES: dict[Level, str] = {lvl: lvl.name.lower() for lvl in Level}
_ALIASES: dict[str, Level] = {**{name: lvl for lvl, name in _NAMES.items()}, "warn": Level.WARNING}


def should_log(candidate: Level, minimum: Level) -> bool:
    """True iff a call at `candidate` passes a `minimum` threshold."""
    return candidate >= minimum


def level_name(level: Level) -> str:
    """Full lowercase name used in JSON output: "debug", "info", "warning", "error"."""
    return _NAMES[level]


def level_tag(level: Level) -> str:
    """Short uppercase tag used in Text and Compact output."""
    return _TAGS[level]


def parse_level(name: str | Level) -> Level:
    """Parse a level name case-insensitively. Accepts "warn" as an alias.
    
    Raises:
        ConfigurationError: If the name is not a known level
    """
    if isinstance(name, Level):
        return name
    if not isinstance(name, str) or (lvl := _ALIASES.get(name.strip().lower())) is None:
        raise ConfigurationError("level", name, tuple(_NAMES.values()))
    return lvl
