"""
Audit Models for Marina Boat Manager

Every change to the fleet is logged for audit purposes.
This provides:
1. A trace of what happened to each boat during a session
2. Debugging information when a data file loads short
3. The only record of lines skipped during load (the operator is not told)

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    FLEET_LOADED = "fleet_loaded"
    FLEET_LOAD_FAILED = "fleet_load_failed"
    RECORD_SKIPPED = "record_skipped"
    FLEET_SAVED = "fleet_saved"
    FLEET_SAVE_FAILED = "fleet_save_failed"

    # Fleet changes
    VESSEL_ADDED = "vessel_added"
    VESSEL_REJECTED = "vessel_rejected"
    VESSEL_REMOVED = "vessel_removed"
    VESSEL_NOT_FOUND = "vessel_not_found"

    # Billing
    PAYMENT_RECORDED = "payment_recorded"
    PAYMENT_REJECTED = "payment_rejected"
    MONTHLY_FEES_APPLIED = "monthly_fees_applied"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what is this about? Vessels are keyed by name.
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'vessel', 'fleet')"
    )
    entity_name: Optional[str] = Field(
        default=None,
        description="Name of the entity this event relates to"
    )

    # Correlation - all events from one session share an ID
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events"
    )

    # Fixed text only; operator-typed names and amounts go in entity_name/details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by an operator command?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_name": self.entity_name,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.vessel_added("Sea Breeze", "slip", correlation_id)
    """

    @staticmethod
    def fleet_loaded(
        location: str,
        loaded: int,
        skipped: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FLEET_LOADED,
            entity_type="fleet",
            entity_name=location,
            correlation_id=correlation_id,
            description=f"Loaded {loaded} vessel(s)",
            details={
                "loaded": loaded,
                "skipped": skipped,
            },
        )

    @staticmethod
    def fleet_load_failed(
        location: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FLEET_LOAD_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="fleet",
            entity_name=location,
            correlation_id=correlation_id,
            description="Could not read the data file; starting with an empty fleet",
            error_message=error_message,
        )

    @staticmethod
    def record_skipped(
        line_number: int,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_SKIPPED,
            severity=AuditSeverity.DEBUG,
            entity_type="record",
            correlation_id=correlation_id,
            description=f"Skipped line {line_number}",
            details={
                "line_number": line_number,
            },
            error_message=reason,
        )

    @staticmethod
    def fleet_saved(
        location: str,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FLEET_SAVED,
            entity_type="fleet",
            entity_name=location,
            correlation_id=correlation_id,
            description=f"Saved {count} vessel(s)",
            details={"count": count},
        )

    @staticmethod
    def fleet_save_failed(
        location: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FLEET_SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="fleet",
            entity_name=location,
            correlation_id=correlation_id,
            description="Could not write the data file; changes were not saved",
            error_message=error_message,
        )

    @staticmethod
    def vessel_added(
        name: str,
        category: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VESSEL_ADDED,
            entity_type="vessel",
            entity_name=name,
            correlation_id=correlation_id,
            description="Vessel added",
            details={"category": category},
            is_user_action=True,
        )

    @staticmethod
    def vessel_rejected(
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VESSEL_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="vessel",
            correlation_id=correlation_id,
            description="Vessel could not be added",
            error_message=reason,
            is_user_action=True,
        )

    @staticmethod
    def vessel_removed(
        name: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VESSEL_REMOVED,
            entity_type="vessel",
            entity_name=name,
            correlation_id=correlation_id,
            description="Vessel removed",
            is_user_action=True,
        )

    @staticmethod
    def vessel_not_found(
        name: str,
        operation: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VESSEL_NOT_FOUND,
            severity=AuditSeverity.WARNING,
            entity_type="vessel",
            entity_name=name,
            correlation_id=correlation_id,
            description=f"No vessel with that name for {operation}",
            details={"operation": operation},
            is_user_action=True,
        )

    @staticmethod
    def payment_recorded(
        name: str,
        amount: str,
        balance: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PAYMENT_RECORDED,
            entity_type="vessel",
            entity_name=name,
            correlation_id=correlation_id,
            description="Payment recorded",
            details={
                "amount": amount,
                "balance": balance,
            },
            is_user_action=True,
        )

    @staticmethod
    def payment_rejected(
        name: str,
        amount: str,
        balance: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PAYMENT_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="vessel",
            entity_name=name,
            correlation_id=correlation_id,
            description="Payment not less than balance; rejected",
            details={
                "amount": amount,
                "balance": balance,
            },
            is_user_action=True,
        )

    @staticmethod
    def monthly_fees_applied(
        vessel_count: int,
        total_charged: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MONTHLY_FEES_APPLIED,
            entity_type="fleet",
            correlation_id=correlation_id,
            description=f"Monthly fees applied to {vessel_count} vessel(s)",
            details={
                "vessel_count": vessel_count,
                "total_charged": total_charged,
            },
            is_user_action=True,
        )
