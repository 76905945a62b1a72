"""
Data File Line Codec

One vessel per line, five comma-separated fields:

    name,length,category,locationValue,fees

Parsing is strictly positional. Fields beyond the fifth are ignored.
There is no quoting: a comma inside a name splits the record.

DESIGN DECISION: Numbers are parsed tolerantly. "30ft" reads as 30 and
"abc" reads as 0, exactly as the legacy files were read. This masks
typos, but changing it would reinterpret existing data files.

Writing is the inverse, with one deliberate wart kept for format
compatibility: length is written with no decimals, so 30.5 ft is saved
as "30" and a reloaded record is shorter than the one that was saved.
"""

import re
from decimal import Decimal

from marina.models.vessel import (
    MAX_NAME_LENGTH,
    TRAILER_TAG_LENGTH,
    LandLocation,
    LocationCategory,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
    category_label,
)


FIELD_SEPARATOR = ","

# Leading numeric prefix, as C's atof/atoi read it
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

# Largest accepted magnitude is below 10**MAX_NUMBER_DIGITS
MAX_NUMBER_DIGITS = 15


# =============================================================================
# ERRORS
# =============================================================================

class RecordError(ValueError):
    """Base exception for a data line that cannot become a Vessel."""
    pass


class MalformedRecordError(RecordError):
    """A required field is missing or empty."""
    pass


class UnknownLocationCategoryError(RecordError):
    """The category token is not one of slip/land/trailor/storage."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown location: {token!r}")


class IncompleteLocationDataError(RecordError):
    """The location field for the category is missing."""

    def __init__(self, category: LocationCategory):
        self.category = category
        super().__init__(f"Incomplete data: missing {category.value} location")


class NumberOutOfRangeError(RecordError):
    """A numeric field is too large to bill or print."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Number out of range: {token[:20]}")


# =============================================================================
# TOLERANT NUMBERS
# =============================================================================

def parse_decimal(text: str) -> Decimal:
    """
    Read the leading number of text, or 0 if there is none.

    >>> parse_decimal("12.5ft")
    Decimal('12.5')
    >>> parse_decimal("n/a")
    Decimal('0')

    Raises:
        NumberOutOfRangeError: magnitude of 10**MAX_NUMBER_DIGITS or more
    """
    match = _DECIMAL_PREFIX.match(text)
    if not match:
        return Decimal("0")
    value = Decimal(match.group(1))
    if value.is_zero():
        return Decimal("0")
    if value.adjusted() >= MAX_NUMBER_DIGITS:
        raise NumberOutOfRangeError(match.group(1))
    return value


def parse_int(text: str) -> int:
    """
    Read the leading integer of text, or 0 if there is none.

    Raises:
        NumberOutOfRangeError: more than MAX_NUMBER_DIGITS significant digits
    """
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    token = match.group(1)
    if len(token.lstrip("+-").lstrip("0")) > MAX_NUMBER_DIGITS:
        raise NumberOutOfRangeError(token)
    return int(token)


# =============================================================================
# PARSE / FORMAT
# =============================================================================

def _field(fields: list[str], index: int):
    return fields[index] if index < len(fields) else None


def _build_location(category: LocationCategory, text: str):
    value = text.strip()
    if category == LocationCategory.SLIP:
        return SlipLocation(slip_number=parse_int(value))
    if category == LocationCategory.LAND:
        return LandLocation(bay_label=value[0])
    if category == LocationCategory.TRAILER:
        return TrailerLocation(tag=value[:TRAILER_TAG_LENGTH])
    return StorageLocation(spot=parse_int(value))


def parse_line(line: str) -> Vessel:
    """
    Parse one data line into a Vessel.

    Raises:
        MalformedRecordError: name, length, category or fees field missing
        UnknownLocationCategoryError: category token not recognised
        IncompleteLocationDataError: location field missing or blank
        NumberOutOfRangeError: a number is too large to bill
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)

    name = _field(fields, 0)
    if name is None or not name.strip():
        raise MalformedRecordError("Invalid format: missing vessel name")

    length_text = _field(fields, 1)
    if length_text is None:
        raise MalformedRecordError("Invalid format: missing vessel length")

    category_text = _field(fields, 2)
    if category_text is None:
        raise MalformedRecordError("Invalid format: missing location category")
    category = LocationCategory.from_token(category_text)
    if category is None:
        raise UnknownLocationCategoryError(category_text)

    location_text = _field(fields, 3)
    if location_text is None or not location_text.strip():
        raise IncompleteLocationDataError(category)
    location = _build_location(category, location_text)

    fees_text = _field(fields, 4)
    if fees_text is None:
        raise MalformedRecordError("Missing fee data")

    return Vessel(
        name=name.strip()[:MAX_NAME_LENGTH],
        length_feet=parse_decimal(length_text),
        location=location,
        outstanding_fees=parse_decimal(fees_text),
    )


def format_line(vessel: Vessel) -> str:
    """Serialize a Vessel to a data line (no trailing newline)."""
    # Length drops its fraction here; see module docstring
    return FIELD_SEPARATOR.join([
        vessel.name,
        f"{vessel.length_feet:.0f}",
        category_label(vessel.location_category),
        vessel.location.value_token(),
        f"{vessel.outstanding_fees:.2f}",
    ])
