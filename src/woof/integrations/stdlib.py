"""Bridge from the standard library `logging` module into woof.

Lets third-party libraries that log through `logging` share woof's level
filter, context and output format.

Example:
    >>> import logging
    >>> from woof.integrations.stdlib import install
    >>> install()
    >>> logging.getLogger("urllib3").warning("Retrying", extra={"fields": [("attempt", "2")]})
    # => [WARN] 10:30:45 urllib3: Retrying
    #      attempt: 2
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from woof.core import Field, Level
from woof.logger import emit as woof_emit

# Stdlib level numbers at or above each threshold map to the woof level
_THRESHOLDS: tuple[tuple[int, Level], ...] = (
    (logging.ERROR, Level.ERROR),
    (logging.WARNING, Level.WARNING),
    (logging.INFO, Level.INFO),
)


def to_woof_level(levelno: int) -> Level:
    """CRITICAL folds into ERROR; anything below INFO is DEBUG."""
    for threshold, level in _THRESHOLDS:
        if levelno >= threshold:
            return level
    return Level.DEBUG


class WoofHandler(logging.Handler):
    """logging.Handler that re-emits records through woof.

    The record's logger name becomes the namespace (the root logger has
    none). ``extra={"fields": ...}`` becomes call-site fields, given
    either as a mapping or as a sequence of pairs. An attached exception is
    added as an ``exc_info`` field.
    """

    def __init__(self, level: int = logging.NOTSET, *, namespaced: bool = True) -> None:
        super().__init__(level)
        self.namespaced = namespaced

    def emit(self, record: logging.LogRecord) -> None:
        try:
            raw = getattr(record, "fields", None) or ()
            pairs = raw.items() if isinstance(raw, Mapping) else raw
            fields: list[Field] = [(str(k), str(v)) for k, v in pairs]
            if record.exc_info:
                fields.append(("exc_info", logging.Formatter().formatException(record.exc_info)))
            ns = record.name if self.namespaced and record.name != "root" else None
            woof_emit(to_woof_level(record.levelno), record.getMessage(), fields, ns)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def install(logger: logging.Logger | str | None = None, level: int = logging.DEBUG,
            *, replace: bool = False, namespaced: bool = True) -> WoofHandler:
    """Attach a WoofHandler to `logger` (default: root) and return it.

    With ``replace=True`` existing handlers are removed first so records are
    not printed twice.
    """
    target = logger if isinstance(logger, logging.Logger) else logging.getLogger(logger)
    if replace:
        for h in list(target.handlers):
            target.removeHandler(h)
    handler = WoofHandler(namespaced=namespaced)
    target.addHandler(handler)
    target.setLevel(level)
    return handler


def uninstall(handler: WoofHandler, logger: logging.Logger | str | None = None) -> None:
    target = logger if isinstance(logger, logging.Logger) else logging.getLogger(logger)
    target.removeHandler(handler)
