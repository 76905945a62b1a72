"""
Session Orchestrator for Marina Boat Manager

This module ties together all the components and defines the
operations one console session performs:
1. Load    (data file -> fleet store)
2. Change  (add / remove / pay / monthly billing)
3. Save    (fleet store -> data file)

DESIGN DECISION: The session owns the one FleetStore. Nothing else
keeps a reference to it, and nothing is process-global.

Persistence failures never end the session: a file that will not open
means an empty fleet, and a file that will not save is reported and the
in-memory fleet is left as it was.
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from marina.audit import AuditLogger
from marina.models.vessel import Vessel, category_label
from marina.services.billing import BillingEngine, PaymentExceedsBalanceError
from marina.services.storage import (
    CapacityExceededError,
    FleetStorageInterface,
    FleetStore,
    FlatFileFleetStorage,
    NotFoundError,
    StorageError,
)
from marina.validation.line_codec import RecordError, format_line, parse_line


class MarinaSession:
    """
    One operator session over one data file.

    Flow:
    1. load()       -> read every record the file holds
    2. operations   -> add_from_line / remove / record_payment / apply_monthly_fees
    3. save()       -> write the whole fleet back to the same place
    """

    def __init__(
        self,
        storage: FleetStorageInterface,
        store: Optional[FleetStore] = None,
        billing: Optional[BillingEngine] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._store = store if store is not None else FleetStore()
        self._billing = billing or BillingEngine()
        self._audit_logger = audit_logger or AuditLogger()
        self.last_error: Optional[str] = None

    @property
    def store(self) -> FleetStore:
        return self._store

    @property
    def storage(self) -> FleetStorageInterface:
        return self._storage

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> bool:
        """
        Replace the fleet with the contents of the backing store.

        Returns False (fleet left empty) if the store could not be read.
        The reason is kept in last_error for the caller to show.
        """
        try:
            lines = self._storage.read_lines()
        except StorageError as e:
            self.last_error = str(e)
            self._store.load_all([])
            self._audit_logger.log_fleet_load_failed(self._storage.location, str(e))
            return False

        result = self._store.load_all(lines)
        for skipped in result.skipped:
            self._audit_logger.log_record_skipped(skipped.line_number, skipped.reason)
        self._audit_logger.log_fleet_loaded(
            self._storage.location, result.loaded, result.skipped_count
        )
        return True

    def save(self) -> bool:
        """
        Write the whole fleet back to the backing store.

        Returns False if the write failed; the fleet in memory is untouched.
        """
        lines = [format_line(vessel) for vessel in self._store.all()]
        try:
            count = self._storage.write_lines(lines)
        except StorageError as e:
            self.last_error = str(e)
            self._audit_logger.log_fleet_save_failed(self._storage.location, str(e))
            return False

        self._audit_logger.log_fleet_saved(self._storage.location, count)
        return True

    # -------------------------------------------------------------------------
    # Fleet operations
    # -------------------------------------------------------------------------

    def inventory(self) -> tuple[Vessel, ...]:
        """All vessels in name order."""
        return self._store.all()

    def find_vessel(self, name: str, operation: str = "lookup") -> Vessel:
        """
        First vessel with this name, ignoring case.

        Raises:
            NotFoundError: No vessel has that name
        """
        try:
            return self._store.find_by_name(name)
        except NotFoundError:
            self._audit_logger.log_vessel_not_found(name, operation)
            raise

    def add_from_line(self, line: str) -> Vessel:
        """
        Parse a data line typed by the operator and add it to the fleet.

        Raises:
            CapacityExceededError: The fleet is full (line is not parsed)
            RecordError: The line could not be parsed
        """
        try:
            if self._store.is_full:
                raise CapacityExceededError(self._store.capacity)
            vessel = parse_line(line)
            self._store.insert(vessel)
        except (RecordError, CapacityExceededError) as e:
            self._audit_logger.log_vessel_rejected(str(e))
            raise

        self._audit_logger.log_vessel_added(
            vessel.name, category_label(vessel.location_category)
        )
        return vessel

    def remove(self, name: str) -> Vessel:
        """
        Remove the first vessel with this name.

        Raises:
            NotFoundError: No vessel has that name
        """
        try:
            vessel = self._store.remove_by_name(name)
        except NotFoundError:
            self._audit_logger.log_vessel_not_found(name, "remove")
            raise

        self._audit_logger.log_vessel_removed(vessel.name)
        return vessel

    def record_payment(self, name: str, amount: Decimal) -> Decimal:
        """
        Apply a payment and return the new balance.

        Raises:
            NotFoundError: No vessel has that name
            PaymentExceedsBalanceError: Amount is not below the balance
        """
        try:
            balance = self._billing.record_payment(self._store, name, amount)
        except NotFoundError:
            self._audit_logger.log_vessel_not_found(name, "payment")
            raise
        except PaymentExceedsBalanceError as e:
            self._audit_logger.log_payment_rejected(
                e.name, f"{amount:.2f}", f"{e.balance:.2f}"
            )
            raise

        self._audit_logger.log_payment_recorded(name, f"{amount:.2f}", f"{balance:.2f}")
        return balance

    def apply_monthly_fees(self) -> Decimal:
        """Bill every vessel for one month; returns the total billed."""
        total = self._billing.apply_monthly_fees(self._store)
        self._audit_logger.log_monthly_fees_applied(len(self._store), f"{total:.2f}")
        return total


def create_session(data_file: Union[str, Path]) -> MarinaSession:
    """
    Create a session over a data file with the default components.

    Components are configured from settings (capacity, billing rates).
    """
    return MarinaSession(
        storage=FlatFileFleetStorage(data_file),
        store=FleetStore(),
        billing=BillingEngine(),
        audit_logger=AuditLogger(),
    )
