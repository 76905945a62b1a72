"""
Audit Logger

DESIGN DECISION: Every change to the fleet is logged.
This provides:
1. Complete traceability of a session
2. Debugging capability (why did my file load short?)
3. A record of skipped data lines, which the operator never sees

The audit logger:
- Writes through structlog onto stdlib logging (stderr)
- Gracefully handles failures (never crashes the app if logging fails)
- Supports correlation IDs to trace one session's events
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from marina.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """
    Configure structlog over stdlib logging.

    Log lines go to stderr; stdout belongs to the interactive console.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger("marina").setLevel(log_level)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


# Default configuration until the application calls configure_logging()
structlog.configure(
    processors=[*_SHARED_PROCESSORS, structlog.processors.JSONRenderer()],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=False,
)


class AuditLogger:
    """
    Central audit logging service.

    Keeps the events of the current session in memory (newest last)
    and writes each one to the structured log.
    """

    def __init__(self, correlation_id: Optional[UUID] = None):
        self._correlation_id = correlation_id or create_correlation_id()
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("marina.audit")

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    @property
    def events(self) -> list[AuditEvent]:
        """Events logged so far in this session."""
        return list(self._events)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the structured log write succeeded.
        """
        if event.correlation_id is None:
            event.correlation_id = self._correlation_id
        self._events.append(event)

        log_dict = event.to_log_dict()
        try:
            if event.severity == AuditSeverity.ERROR:
                self._logger.error("audit_event", **log_dict)
            elif event.severity == AuditSeverity.WARNING:
                self._logger.warning("audit_event", **log_dict)
            elif event.severity == AuditSeverity.DEBUG:
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except (OSError, ValueError) as e:
            # A broken log stream must never take the fleet down with it
            print(f"audit log write failed: {e}", file=sys.stderr)
            return False

        return True

    def log_fleet_loaded(self, location: str, loaded: int, skipped: int) -> None:
        self.log(AuditEventBuilder.fleet_loaded(location, loaded, skipped))

    def log_fleet_load_failed(self, location: str, error_message: str) -> None:
        self.log(AuditEventBuilder.fleet_load_failed(location, error_message))

    def log_record_skipped(self, line_number: int, reason: str) -> None:
        self.log(AuditEventBuilder.record_skipped(line_number, reason))

    def log_fleet_saved(self, location: str, count: int) -> None:
        self.log(AuditEventBuilder.fleet_saved(location, count))

    def log_fleet_save_failed(self, location: str, error_message: str) -> None:
        self.log(AuditEventBuilder.fleet_save_failed(location, error_message))

    def log_vessel_added(self, name: str, category: str) -> None:
        self.log(AuditEventBuilder.vessel_added(name, category))

    def log_vessel_rejected(self, reason: str) -> None:
        self.log(AuditEventBuilder.vessel_rejected(reason))

    def log_vessel_removed(self, name: str) -> None:
        self.log(AuditEventBuilder.vessel_removed(name))

    def log_vessel_not_found(self, name: str, operation: str) -> None:
        self.log(AuditEventBuilder.vessel_not_found(name, operation))

    def log_payment_recorded(self, name: str, amount: str, balance: str) -> None:
        self.log(AuditEventBuilder.payment_recorded(name, amount, balance))

    def log_payment_rejected(self, name: str, amount: str, balance: str) -> None:
        self.log(AuditEventBuilder.payment_rejected(name, amount, balance))

    def log_monthly_fees_applied(self, vessel_count: int, total_charged: str) -> None:
        self.log(AuditEventBuilder.monthly_fees_applied(vessel_count, total_charged))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One ID per session: every event from load to save shares it.
    """
    return uuid4()
