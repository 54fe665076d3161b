"""woof - small structured logging with scoped context and pluggable formats.

Leveled messages carry ordered key/value fields. Calls below the configured
level are dropped, the rest are enriched with global and scoped context,
rendered as Text, Compact, JSON or a custom format, and written as one line
to stdout.

Quick Start:
    >>> import woof
    >>> woof.info("Server started", [woof.int_field("port", 8080)])
    # => [INFO] 10:30:45 Server started
    #      port: 8080

Configuration (process-wide):
    >>> woof.configure(woof.Level.INFO, woof.Json, woof.ColorMode.NEVER)
    >>> woof.set_global_context([("service", "billing")])
    >>> woof.info("Connected", [("host", "db1")])
    # => {"level":"info","time":"2026-02-11T10:30:45.123Z","msg":"Connected","service":"billing","host":"db1"}

Scoped context (per thread / asyncio task):
    >>> with woof.context([("request_id", "abc")]):
    ...     woof.warning("Slow query")
    >>> woof.with_context([("request_id", "abc")], handle)

Namespaced loggers:
    >>> db = woof.new("db")
    >>> woof.log(db, woof.Level.DEBUG, "Query done", [("ms", "12")])

Pipeline helpers:
    >>> user = woof.tap_info(load_user(42), "User loaded")
    >>> woof.log_error(woof.Err("timeout"), "Fetch failed")
    >>> rows = woof.time("export", run_export)
"""

from __future__ import annotations

__version__ = "1.0.0"

# Data model
from .core import Entry, Field, FieldList, Level, bool_field, field, float_field, int_field, level_name, should_log

# Errors
from .foundation.errors import ConfigurationError, WoofError

# Formats
from .formatting import ColorMode, Compact, Custom, Format, Json, Text, escape_json, resolve_colors

# Logging facade
from .logger import (
    Logger,
    debug,
    debug_lazy,
    emit,
    error,
    error_lazy,
    format,
    info,
    info_lazy,
    log,
    log_error,
    new,
    tap,
    tap_debug,
    tap_error,
    tap_info,
    tap_warning,
    time,
    timed,
    warning,
    warning_lazy,
    with_context,
)

# Result values for log_error
from .monads import Err, Ok, Result

# Configuration & context
from .runtime import (
    Config,
    Provider,
    SystemProvider,
    configure,
    current_scoped,
    get_config,
    reset,
    reset_provider,
    set_colors,
    set_format,
    set_global_context,
    set_level,
    set_provider,
)
from .runtime import scope as context

__all__ = [
    # Data model
    "Entry",
    "Field",
    "FieldList",
    "Level",
    "bool_field",
    "field",
    "float_field",
    "int_field",
    "level_name",
    "should_log",
    # Errors
    "ConfigurationError",
    "WoofError",
    # Formats
    "ColorMode",
    "Compact",
    "Custom",
    "Format",
    "Json",
    "Text",
    "escape_json",
    "resolve_colors",
    # Logging
    "Logger",
    "debug",
    "debug_lazy",
    "emit",
    "error",
    "error_lazy",
    "format",
    "info",
    "info_lazy",
    "log",
    "log_error",
    "new",
    "tap",
    "tap_debug",
    "tap_error",
    "tap_info",
    "tap_warning",
    "time",
    "timed",
    "warning",
    "warning_lazy",
    "with_context",
    # Results
    "Err",
    "Ok",
    "Result",
    # Configuration & context
    "Config",
    "Provider",
    "SystemProvider",
    "configure",
    "context",
    "current_scoped",
    "get_config",
    "reset",
    "reset_provider",
    "set_colors",
    "set_format",
    "set_global_context",
    "set_level",
    "set_provider",
]
