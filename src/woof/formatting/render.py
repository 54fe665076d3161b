"""Render an Entry to a single output string.

Rendering is pure apart from Custom delegates (caller code) and the
environment reads done by `resolve_colors` for AUTO mode.

Example:
    >>> entry = Entry(Level.INFO, "Server started", timestamp="2026-02-11T10:30:45.123Z")
    >>> render(entry, Text, colored=False)
    '[INFO] 10:30:45 Server started'
    >>> render(entry, Compact, colored=False)
    'INFO 2026-02-11T10:30:45.123Z Server started'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from woof.core import Entry, level_name, level_tag
from woof.runtime.provider import get_provider

from .ansi import DIM, LEVEL_COLORS, paint
from .escape import json_pair
from .formats import ColorMode, CompactFormat, Custom, Format, JsonFormat, TextFormat

if TYPE_CHECKING:
    from woof.runtime.provider import Provider

NO_COLOR_VAR = "NO_COLOR"


def resolve_colors(mode: ColorMode, provider: Provider | None = None) -> bool:
    """Decide whether Text output is colored. AUTO: stdout is a TTY and NO_COLOR is unset."""
    match mode:
        case ColorMode.ALWAYS: return True
        case ColorMode.NEVER: return False
        case _:
            p = provider or get_provider()
            return p.stdout_is_tty() and p.lookup_env(NO_COLOR_VAR) is None


def render(entry: Entry, fmt: Format, colored: bool = False) -> str:
    """Dispatch on format. `colored` only affects Text."""
    match fmt:
        case TextFormat(): return render_text(entry, colored)
        case CompactFormat(): return render_compact(entry)
        case JsonFormat(): return render_json(entry)
        case Custom(render=fn): return fn(entry)
        case _: raise TypeError(f"Unsupported format: {fmt!r}")


def render_text(entry: Entry, colored: bool = False) -> str:
    tag, time = level_tag(entry.level), entry.short_time
    if colored:
        tag, time = paint(tag, LEVEL_COLORS[entry.level]), paint(time, DIM)
    ns = f"{entry.namespace}: " if entry.namespace is not None else ""
    head = f"[{tag}] {time} {ns}{entry.message}"
    return head + "".join(f"\n  {k}: {v}" for k, v in entry.fields)


def render_compact(entry: Entry) -> str:
    ns = f" ns={entry.namespace}" if entry.namespace is not None else ""
    head = f"{level_tag(entry.level)} {entry.timestamp}{ns} {entry.message}"
    return head + "".join(f" {k}={v}" for k, v in entry.fields)


def render_json(entry: Entry) -> str:
    """Hand-built JSON object. Member order: level, time, ns?, msg, then fields as given."""
    pairs = [json_pair("level", level_name(entry.level)), json_pair("time", entry.timestamp)]
    if entry.namespace is not None:
        pairs.append(json_pair("ns", entry.namespace))
    pairs.append(json_pair("msg", entry.message))
    pairs.extend(json_pair(k, v) for k, v in entry.fields)
    return "{" + ",".join(pairs) + "}"
