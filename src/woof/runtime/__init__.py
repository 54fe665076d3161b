"""Runtime state: configuration store, scoped context, entry assembly and external services."""

from .assembler import build_entry
from .provider import Provider, SystemProvider, get_provider, reset_provider, set_provider
from .state import (
    Config,
    ConfigStore,
    configure,
    current_scoped,
    get_config,
    reset,
    run_scoped,
    scope,
    set_colors,
    set_format,
    set_global_context,
    set_level,
)

__all__ = [
    "Config",
    "ConfigStore",
    "Provider",
    "SystemProvider",
    "build_entry",
    "configure",
    "current_scoped",
    "get_config",
    "get_provider",
    "reset",
    "reset_provider",
    "run_scoped",
    "scope",
    "set_colors",
    "set_format",
    "set_global_context",
    "set_level",
    "set_provider",
]
