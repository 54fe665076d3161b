"""Process-wide configuration and per-flow scoped context.

Configuration is a single immutable `Config` snapshot. Setters build a new
snapshot and swap it in under a re-entrant lock; readers just load the current
reference, so a reader sees either the old snapshot or the new one, never a mix.
The lock is re-entrant because a Custom formatter may itself log or
reconfigure while a setter is running on the same thread.

Scoped context lives in a ContextVar: each OS thread starts with its own empty
value and each asyncio task runs on a copy of its creator's context, so
concurrent flows never see each other's scoped fields.

Example:
    >>> set_global_context([("app", "svc")])
    >>> with scope([("req", "1")]):
    ...     current_scoped()
    (('req', '1'),)
    >>> current_scoped()
    ()
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, TypeVar

from woof.core import EMPTY, Field, FieldList, Level, to_fields
from woof.formatting.formats import ColorMode, Format, Text

if TYPE_CHECKING:
    from types import TracebackType

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration snapshot."""

    level: Level = Level.DEBUG
    format: Format = Text
    colors: ColorMode = ColorMode.AUTO
    global_context: FieldList = EMPTY


# ─────────────────────────────────────────────────────────────────────────────
# Configuration Store
# ─────────────────────────────────────────────────────────────────────────────


class ConfigStore:
    """Holds the current Config. Writes swap snapshots under an RLock, reads are lock-free."""

    __slots__ = ("_config", "_lock")

    def __init__(self) -> None:
        self._config, self._lock = Config(), threading.RLock()

    def read(self) -> Config:
        return self._config

    def update(self, **changes: object) -> Config:
        """Replace the given fields atomically and return the new snapshot."""
        with self._lock:
            self._config = replace(self._config, **changes)
            return self._config

    def reset(self) -> None:
        with self._lock:
            self._config = Config()


_store = ConfigStore()


def get_config() -> Config:
    """Current configuration snapshot."""
    return _store.read()


def configure(level: Level, format: Format, colors: ColorMode) -> None:  # noqa: A002 - matches Config field
    """Replace level, format and colors in one step. Global context is kept."""
    _store.update(level=level, format=format, colors=colors)


def set_level(level: Level) -> None:
    _store.update(level=level)


def set_format(format: Format) -> None:  # noqa: A002
    _store.update(format=format)


def set_colors(mode: ColorMode) -> None:
    _store.update(colors=mode)


def set_global_context(fields: Iterable[Field]) -> None:
    """Replace the global context wholesale (no merge)."""
    _store.update(global_context=to_fields(fields))


def reset() -> None:
    """Restore default configuration. Scoped context is untouched."""
    _store.reset()


# ─────────────────────────────────────────────────────────────────────────────
# Context Store
# ─────────────────────────────────────────────────────────────────────────────


_scoped: ContextVar[FieldList] = ContextVar("woof_scoped_context", default=EMPTY)


def current_scoped() -> FieldList:
    """Scoped fields visible to the calling thread/task, outermost first."""
    return _scoped.get()


class scope:
    """Context manager appending fields to the scoped context for its duration.

    Nested scopes accumulate (outer fields first). The previous value is
    restored on exit, whether the block returns or raises.
    """

    __slots__ = ("_fields", "_token")

    def __init__(self, fields: Iterable[Field]) -> None:
        self._fields: FieldList = to_fields(fields)
        self._token: Token[FieldList] | None = None

    def __enter__(self) -> FieldList:
        self._token = _scoped.set(new := _scoped.get() + self._fields)
        return new

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _scoped.reset(self._token)
            self._token = None


def run_scoped(fields: Iterable[Field], body: Callable[[], T]) -> T:
    """Run `body` with `fields` appended to the scoped context, then restore it."""
    with scope(fields):
        return body()
