"""
Core Data Models for Marina Boat Manager

A Vessel is one line of the marina's data file. Where the boat is kept
decides both the shape of its location data and its monthly rate, so the
location is modelled as a tagged union: one small model per category,
each carrying only the field that category needs.

DESIGN DECISION: We use Pydantic v2 discriminated unions for the location.
Reading a slip number off a boat that lives on a trailer is impossible
by construction.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Record limits inherited from the legacy data file
MAX_NAME_LENGTH = 127
TRAILER_TAG_LENGTH = 9
UNKNOWN_CATEGORY_LABEL = "unknown"


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class LocationCategory(str, Enum):
    """
    Where a boat is kept.

    The values double as the tokens written to the data file.
    "trailor" is the legacy spelling and must not be corrected:
    existing files depend on it.
    """
    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"

    @classmethod
    def from_token(cls, token: str) -> Optional["LocationCategory"]:
        """Case-insensitive lookup of a file token. None if unrecognised."""
        wanted = token.strip().lower()
        for category in cls:
            if category.value == wanted:
                return category
        return None


def category_label(category: object) -> str:
    """File token for a category, "unknown" for anything unrecognised."""
    try:
        return LocationCategory(category).value
    except ValueError:
        return UNKNOWN_CATEGORY_LABEL


# =============================================================================
# LOCATION VARIANTS
# =============================================================================

class SlipLocation(BaseModel):
    """Boat moored in a numbered slip (1-85, not enforced)."""

    category: Literal[LocationCategory.SLIP] = LocationCategory.SLIP
    slip_number: int

    def value_token(self) -> str:
        return str(self.slip_number)


class LandLocation(BaseModel):
    """Boat on land in a lettered bay (A-Z, not enforced)."""

    category: Literal[LocationCategory.LAND] = LocationCategory.LAND
    bay_label: str = Field(..., min_length=1, max_length=1)

    def value_token(self) -> str:
        return self.bay_label


class TrailerLocation(BaseModel):
    """Boat on a trailer, identified by its licence tag."""

    category: Literal[LocationCategory.TRAILER] = LocationCategory.TRAILER
    tag: str = Field(..., max_length=TRAILER_TAG_LENGTH)

    def value_token(self) -> str:
        return self.tag


class StorageLocation(BaseModel):
    """Boat in a numbered storage spot (1-50, not enforced)."""

    category: Literal[LocationCategory.STORAGE] = LocationCategory.STORAGE
    spot: int

    def value_token(self) -> str:
        return str(self.spot)


Location = Annotated[
    Union[SlipLocation, LandLocation, TrailerLocation, StorageLocation],
    Field(discriminator="category"),
]


# =============================================================================
# CORE VESSEL MODEL
# =============================================================================

class Vessel(BaseModel):
    """
    One boat in the fleet.

    The name is the lookup key (case-insensitive) but is not unique:
    two boats may share a name, and lookups then return the first one
    in fleet order.

    Outstanding fees grow with monthly billing and shrink with payments.
    They are not validated to stay non-negative.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_NAME_LENGTH,
        description="Vessel name (case-insensitive lookup key)"
    )
    length_feet: Decimal = Field(
        ...,
        description="Length in feet, the billing multiplier"
    )
    location: Location
    outstanding_fees: Decimal = Field(
        default=Decimal("0"),
        description="Balance owed, in dollars"
    )

    @property
    def location_category(self) -> LocationCategory:
        return self.location.category

    @property
    def sort_key(self) -> str:
        """Case-insensitive ordering key for the fleet."""
        return self.name.lower()
