"""
Data Models Package

This package contains all Pydantic models used in the Marina Boat Manager.
Every record read from or written to the data file passes through these schemas.
"""

from marina.models.vessel import (
    LandLocation,
    Location,
    LocationCategory,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
    category_label,
)
from marina.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Vessel models
    "LandLocation",
    "Location",
    "LocationCategory",
    "SlipLocation",
    "StorageLocation",
    "TrailerLocation",
    "Vessel",
    "category_label",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
