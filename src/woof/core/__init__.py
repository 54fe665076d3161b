"""Core data model: levels, fields and entries."""

from .entry import Entry
from .fields import EMPTY, Field, FieldList, bool_field, field, float_field, int_field, to_fields
from .level import Level, level_name, level_tag, parse_level, should_log

__all__ = [
    "EMPTY",
    "Entry",
    "Field",
    "FieldList",
    "Level",
    "bool_field",
    "field",
    "float_field",
    "int_field",
    "level_name",
    "level_tag",
    "parse_level",
    "should_log",
    "to_fields",
]
