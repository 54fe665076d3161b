"""Formatting engine: format variants, ANSI colors, JSON escaping and rendering."""

from .escape import escape_json
from .formats import ColorMode, Compact, CompactFormat, Custom, Format, Json, JsonFormat, Text, TextFormat, parse_color_mode, parse_format
from .render import render, render_compact, render_json, render_text, resolve_colors

__all__ = [
    "ColorMode",
    "Compact",
    "CompactFormat",
    "Custom",
    "Format",
    "Json",
    "JsonFormat",
    "Text",
    "TextFormat",
    "escape_json",
    "parse_color_mode",
    "parse_format",
    "render",
    "render_compact",
    "render_json",
    "render_text",
    "resolve_colors",
]
