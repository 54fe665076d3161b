"""Logger facade: leveled logging, namespaced loggers and pipeline helpers.

Every call is filtered against the configured minimum level first. Only calls
that pass pay for entry assembly, rendering and the stdout write.

Quick Start:
    >>> import woof
    >>> woof.info("Server started", [woof.int_field("port", 8080)])
    # => [INFO] 10:30:45 Server started
    #      port: 8080

    >>> db = woof.new("db")
    >>> db.debug("Query done", [("ms", "12")])
    # => [DEBUG] 10:30:45 db: Query done
    #      ms: 12

    >>> woof.with_context([("request_id", "abc")], handle_request)
    >>> total = woof.time("import", run_import)
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from woof.core import Entry, Field, Level, int_field, should_log
from woof.formatting.formats import Format, TextFormat
from woof.formatting.render import render, resolve_colors
from woof.runtime.assembler import build_entry
from woof.runtime.provider import get_provider
from woof.runtime.state import Config, get_config, run_scoped

if TYPE_CHECKING:
    from woof.monads import Result

P = ParamSpec("P")
T = TypeVar("T")
R = TypeVar("R", bound="Result")

Fields = Iterable[Field]


# ─────────────────────────────────────────────────────────────────────────────
# Emission
# ─────────────────────────────────────────────────────────────────────────────


def _emit(level: Level, message: str, fields: Fields, namespace: str | None = None) -> None:
    cfg = get_config()
    if not should_log(level, cfg.level):
        return
    _write(level, message, fields, namespace, cfg)


def emit(level: Level, message: str, fields: Fields = (), namespace: str | None = None) -> None:
    """Log at a level chosen at runtime, optionally under a namespace."""
    _emit(level, message, fields, namespace)


def _emit_lazy(level: Level, thunk: Callable[[], str], fields: Fields, namespace: str | None = None) -> None:
    cfg = get_config()
    if not should_log(level, cfg.level):
        return
    _write(level, thunk(), fields, namespace, cfg)


def _write(level: Level, message: str, fields: Fields, namespace: str | None, cfg: Config) -> None:
    entry = build_entry(level, message, fields, namespace, config=cfg)
    colored = isinstance(cfg.format, TextFormat) and resolve_colors(cfg.colors)
    get_provider().write_line(render(entry, cfg.format, colored))


# ─────────────────────────────────────────────────────────────────────────────
# Plain & Lazy Logging
# ─────────────────────────────────────────────────────────────────────────────


def debug(message: str, fields: Fields = ()) -> None: _emit(Level.DEBUG, message, fields)
def info(message: str, fields: Fields = ()) -> None: _emit(Level.INFO, message, fields)
def warning(message: str, fields: Fields = ()) -> None: _emit(Level.WARNING, message, fields)
def error(message: str, fields: Fields = ()) -> None: _emit(Level.ERROR, message, fields)


def debug_lazy(thunk: Callable[[], str], fields: Fields = ()) -> None:
    """Log at DEBUG, building the message only if DEBUG is enabled.

    Example:
        >>> woof.debug_lazy(lambda: f"state={expensive_dump()}")
    """
    _emit_lazy(Level.DEBUG, thunk, fields)


def info_lazy(thunk: Callable[[], str], fields: Fields = ()) -> None: _emit_lazy(Level.INFO, thunk, fields)
def warning_lazy(thunk: Callable[[], str], fields: Fields = ()) -> None: _emit_lazy(Level.WARNING, thunk, fields)
def error_lazy(thunk: Callable[[], str], fields: Fields = ()) -> None: _emit_lazy(Level.ERROR, thunk, fields)


# ─────────────────────────────────────────────────────────────────────────────
# Namespaced Loggers
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Logger:
    """Handle carrying a namespace. Holds no other state; config and context are shared."""

    namespace: str

    def log(self, level: Level, message: str, fields: Fields = ()) -> None:
        _emit(level, message, fields, self.namespace)

    def debug(self, message: str, fields: Fields = ()) -> None: self.log(Level.DEBUG, message, fields)
    def info(self, message: str, fields: Fields = ()) -> None: self.log(Level.INFO, message, fields)
    def warning(self, message: str, fields: Fields = ()) -> None: self.log(Level.WARNING, message, fields)
    def error(self, message: str, fields: Fields = ()) -> None: self.log(Level.ERROR, message, fields)


def new(namespace: str) -> Logger:
    return Logger(namespace)


def log(logger: Logger, level: Level, message: str, fields: Fields = ()) -> None:
    """Log through a namespaced logger. The namespace shows up in every format."""
    logger.log(level, message, fields)


# ─────────────────────────────────────────────────────────────────────────────
# Context
# ─────────────────────────────────────────────────────────────────────────────


def with_context(fields: Fields, body: Callable[[], T]) -> T:
    """Run `body` with extra fields attached to every log call it makes.

    Nested calls accumulate (outer first). The previous context is restored
    however `body` exits. Isolated per thread and per asyncio task.

    Example:
        >>> def handle() -> str:
        ...     woof.info("Handling")  # carries request_id=abc
        ...     return "ok"
        >>> woof.with_context([("request_id", "abc")], handle)
        'ok'
    """
    return run_scoped(fields, body)


# ─────────────────────────────────────────────────────────────────────────────
# Pipeline Helpers
# ─────────────────────────────────────────────────────────────────────────────


def tap(level: Level, value: T, message: str, fields: Fields = ()) -> T:
    """Log, then return `value` unchanged."""
    _emit(level, message, fields)
    return value


def tap_debug(value: T, message: str, fields: Fields = ()) -> T: return tap(Level.DEBUG, value, message, fields)
def tap_info(value: T, message: str, fields: Fields = ()) -> T: return tap(Level.INFO, value, message, fields)
def tap_warning(value: T, message: str, fields: Fields = ()) -> T: return tap(Level.WARNING, value, message, fields)
def tap_error(value: T, message: str, fields: Fields = ()) -> T: return tap(Level.ERROR, value, message, fields)


def log_error(result: R, message: str, fields: Fields = ()) -> R:
    """Log at ERROR if `result` is an Err. Returns `result` unchanged either way.

    Accepts any object with an `is_err()` method, woof's own Result included.
    """
    if result.is_err():
        _emit(Level.ERROR, message, fields)
    return result


def time(label: str, body: Callable[[], T]) -> T:
    """Run `body` and log "<label> completed" at INFO with a `duration_ms` field.

    Nothing is logged if `body` raises; the exception propagates as-is.
    """
    clock = get_provider()
    start = clock.monotonic_millis()
    result = body()
    info(f"{label} completed", [int_field("duration_ms", clock.monotonic_millis() - start)])
    return result


def timed(label: str | None = None) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator form of `time`. Label defaults to the function name. Works on coroutines too.

    Example:
        >>> @woof.timed()
        ... def rebuild_index() -> int: ...
        # => [INFO] 10:30:45 rebuild_index completed
        #      duration_ms: 41
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        name = label or func.__name__

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return time(name, lambda: func(*args, **kwargs))

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            clock = get_provider()
            start = clock.monotonic_millis()
            result = await func(*args, **kwargs)  # type: ignore[misc]
            info(f"{name} completed", [int_field("duration_ms", clock.monotonic_millis() - start)])
            return result

        return async_wrapper if inspect.iscoroutinefunction(func) else wrapper  # type: ignore[return-value]

    return decorator


# ─────────────────────────────────────────────────────────────────────────────
# Preview
# ─────────────────────────────────────────────────────────────────────────────


def format(entry: Entry, format: Format) -> str:  # noqa: A001, A002
    """Render an entry without colors and without consulting the terminal or environment."""
    return render(entry, format, False)
