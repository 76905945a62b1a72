"""Validation package: data line parsing and formatting."""

from marina.validation.line_codec import (
    IncompleteLocationDataError,
    MalformedRecordError,
    NumberOutOfRangeError,
    RecordError,
    UnknownLocationCategoryError,
    format_line,
    parse_decimal,
    parse_int,
    parse_line,
)

__all__ = [
    "IncompleteLocationDataError",
    "MalformedRecordError",
    "NumberOutOfRangeError",
    "RecordError",
    "UnknownLocationCategoryError",
    "format_line",
    "parse_decimal",
    "parse_int",
    "parse_line",
]
