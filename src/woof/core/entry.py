"""The Entry record handed to formatters."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import EMPTY, FieldList
from .level import Level


@dataclass(frozen=True, slots=True)
class Entry:
    """Fully resolved log call, ready for rendering.
    
    Built once per emitted call, never mutated. `fields` is ordered
    global context, then scoped context, then call-site fields.
    
    Example:
        >>> Entry(Level.INFO, "Server started", timestamp="2026-02-11T10:30:45.123Z")
    """
    
    level: Level
    message: str
    fields: FieldList = EMPTY
    namespace: str | None = None
    timestamp: str = ""
    
    @property
    def short_time(self) -> str:
        """HH:MM:SS slice of an ISO-8601 `YYYY-MM-DDTHH:MM:SS.sssZ` timestamp. Unvalidated."""
        return self.timestamp[11:19]
