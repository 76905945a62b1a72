"""Tests for MarinaSession."""

from decimal import Decimal

import pytest

from marina.audit import AuditLogger
from marina.models.audit import AuditEventType, AuditSeverity
from marina.orchestrator import MarinaSession
from marina.services.billing import PaymentExceedsBalanceError
from marina.services.storage import (
    CapacityExceededError,
    FleetStore,
    InMemoryFleetStorage,
    NotFoundError,
    StorageReadError,
    StorageWriteError,
)
from marina.validation.line_codec import (
    IncompleteLocationDataError,
    MalformedRecordError,
    UnknownLocationCategoryError,
)


class BrokenStorage(InMemoryFleetStorage):
    """Storage whose reads and writes always fail."""

    def read_lines(self):
        raise StorageReadError("Could not open <broken> for reading")

    def write_lines(self, lines):
        raise StorageWriteError("Could not open file <broken> for writing")


def event_types(session: MarinaSession) -> list[AuditEventType]:
    return [event.event_type for event in session.audit_logger.events]


class TestLoad:
    """Tests for MarinaSession.load."""

    def test_load_logs_skipped_lines(self, sample_lines):
        """Test skipped lines are audited but not returned to the caller."""
        session = MarinaSession(InMemoryFleetStorage(["X,10,dock,1,0", *sample_lines]))
        assert session.load() is True

        skipped = [
            e for e in session.audit_logger.events
            if e.event_type == AuditEventType.RECORD_SKIPPED
        ]
        assert len(skipped) == 1
        assert skipped[0].severity == AuditSeverity.DEBUG
        loaded = session.audit_logger.events[-1]
        assert loaded.event_type == AuditEventType.FLEET_LOADED
        assert loaded.details == {"loaded": 4, "skipped": 1}

    def test_load_failure_leaves_empty_fleet(self, make_vessel):
        """Test an unreadable store is reported and not fatal."""
        store = FleetStore(capacity=10)
        store.insert(make_vessel("Stale"))
        session = MarinaSession(BrokenStorage(), store=store)

        assert session.load() is False
        assert len(session.store) == 0
        assert "for reading" in session.last_error
        assert event_types(session) == [AuditEventType.FLEET_LOAD_FAILED]


class TestAddFromLine:
    """Tests for MarinaSession.add_from_line."""

    def test_add_inserts_in_order(self, session):
        """Test a valid line is added at its sorted position."""
        vessel = session.add_from_line("Albatross,25,land,D,0")
        assert vessel.name == "Albatross"
        assert session.inventory()[0] is vessel
        assert event_types(session)[-1] == AuditEventType.VESSEL_ADDED

    def test_add_unknown_category_is_rejected(self, session):
        """Test an unknown category is reported on interactive add."""
        before = len(session.store)
        with pytest.raises(UnknownLocationCategoryError):
            session.add_from_line("X,10,dock,1,0")
        assert len(session.store) == before
        assert event_types(session)[-1] == AuditEventType.VESSEL_REJECTED

    @pytest.mark.parametrize(
        "line, error",
        [
            ("", MalformedRecordError),
            ("Half,10,slip", IncompleteLocationDataError),
            ("NoFees,10,slip,3", MalformedRecordError),
        ],
    )
    def test_add_bad_line_leaves_fleet_unchanged(self, session, line, error):
        """Test codec failures abort the add."""
        before = [v.name for v in session.inventory()]
        with pytest.raises(error):
            session.add_from_line(line)
        assert [v.name for v in session.inventory()] == before

    def test_add_duplicate_name_accepted(self, session):
        """Test duplicate names are not rejected."""
        session.add_from_line("pirate,12,slip,2,0")
        matches = [v for v in session.inventory() if v.name.lower() == "pirate"]
        assert len(matches) == 2

    def test_add_when_full(self, make_vessel):
        """Test adding to a full fleet raises CapacityExceededError."""
        store = FleetStore(capacity=1)
        store.insert(make_vessel("Only"))
        session = MarinaSession(InMemoryFleetStorage(), store=store)

        with pytest.raises(CapacityExceededError):
            session.add_from_line("Another,10,slip,1,0")
        assert len(session.store) == 1


class TestRemove:
    """Tests for MarinaSession.remove."""

    def test_remove(self, session):
        removed = session.remove("TINY")
        assert removed.name == "Tiny"
        assert "Tiny" not in [v.name for v in session.inventory()]
        assert event_types(session)[-1] == AuditEventType.VESSEL_REMOVED

    def test_remove_missing(self, session):
        with pytest.raises(NotFoundError):
            session.remove("Nautilus")
        assert len(session.store) == 4
        assert event_types(session)[-1] == AuditEventType.VESSEL_NOT_FOUND


class TestBilling:
    """Tests for payments and monthly billing through the session."""

    def test_payment_below_balance(self, session):
        """Test a payment below the balance is applied exactly."""
        balance = session.record_payment("Moby Duck", Decimal("12.00"))
        assert balance == Decimal("40.00")
        event = session.audit_logger.events[-1]
        assert event.event_type == AuditEventType.PAYMENT_RECORDED
        assert event.details == {"amount": "12.00", "balance": "40.00"}

    def test_payment_equal_to_balance_rejected(self, session):
        """Test paying off the exact balance is refused."""
        with pytest.raises(PaymentExceedsBalanceError):
            session.record_payment("Moby Duck", Decimal("52.00"))
        assert session.find_vessel("Moby Duck").outstanding_fees == Decimal("52.00")
        assert event_types(session)[-1] == AuditEventType.PAYMENT_REJECTED

    def test_payment_unknown_vessel(self, session):
        with pytest.raises(NotFoundError):
            session.record_payment("Nautilus", Decimal("1"))

    def test_monthly_fees(self, session):
        """Test monthly billing through the session."""
        total = session.apply_monthly_fees()
        assert total == Decimal("1497.00")
        assert session.find_vessel("Big Brother").outstanding_fees == Decimal("1450.00")
        event = session.audit_logger.events[-1]
        assert event.details == {"vessel_count": 4, "total_charged": "1497.00"}


class TestSave:
    """Tests for MarinaSession.save."""

    def test_save_writes_formatted_lines(self, session):
        assert session.save() is True
        assert session.storage.lines == [
            "Big Brother,20,slip,27,1200.00",
            "Moby Duck,40,land,C,52.00",
            "Pirate,23,trailor,ABC123,0.00",
            "Tiny,10,storage,7,5.00",
        ]

    def test_save_failure_keeps_fleet(self, make_vessel):
        """Test a failed save is reported and the fleet is kept."""
        store = FleetStore(capacity=10)
        store.insert(make_vessel("Keeper"))
        session = MarinaSession(BrokenStorage(), store=store, audit_logger=AuditLogger())

        assert session.save() is False
        assert "for writing" in session.last_error
        assert [v.name for v in session.inventory()] == ["Keeper"]
        assert event_types(session) == [AuditEventType.FLEET_SAVE_FAILED]

    def test_events_share_correlation_id(self, session):
        """Test every event in a session carries the session's ID."""
        session.apply_monthly_fees()
        session.save()
        ids = {event.correlation_id for event in session.audit_logger.events}
        assert ids == {session.audit_logger.correlation_id}
