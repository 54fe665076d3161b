"""Entry assembly: merge context layers and stamp the time."""

from __future__ import annotations

from collections.abc import Iterable

from woof.core import Entry, Field, Level, to_fields

from .provider import get_provider
from .state import Config, current_scoped, get_config


def build_entry(
    level: Level,
    message: str,
    fields: Iterable[Field] = (),
    namespace: str | None = None,
    *,
    config: Config | None = None,
) -> Entry:
    """Build an Entry with fields ordered global ++ scoped ++ call-site. No filtering here.
    
    Pass `config` to reuse the snapshot the caller already filtered against.
    """
    merged = (config or get_config()).global_context + current_scoped() + to_fields(fields)
    return Entry(level, message, merged, namespace, get_provider().wall_clock_now())
