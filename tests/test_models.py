"""
Tests for Marina Boat Manager models

Test strategy:
1. Unit tests for individual components (models, codec, store, billing)
2. Session tests against in-memory storage
3. File and console tests through tmp_path and StringIO
"""

import pytest
from decimal import Decimal

from pydantic import TypeAdapter, ValidationError

from marina.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
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


class TestLocationCategory:
    """Tests for the location category enum."""

    def test_file_tokens(self):
        """Test category values are the data file tokens."""
        assert LocationCategory.SLIP.value == "slip"
        assert LocationCategory.LAND.value == "land"
        assert LocationCategory.TRAILER.value == "trailor"
        assert LocationCategory.STORAGE.value == "storage"

    def test_from_token_ignores_case(self):
        """Test token lookup is case-insensitive."""
        assert LocationCategory.from_token("SLIP") == LocationCategory.SLIP
        assert LocationCategory.from_token("Trailor") == LocationCategory.TRAILER

    def test_from_token_does_not_accept_corrected_spelling(self):
        """Test that 'trailer' is not a valid token."""
        assert LocationCategory.from_token("trailer") is None

    def test_category_label(self):
        """Test labels for known categories."""
        assert category_label(LocationCategory.LAND) == "land"
        assert category_label("storage") == "storage"

    def test_category_label_unknown_fallback(self):
        """Test unrecognised values map to 'unknown'."""
        assert category_label("dock") == "unknown"
        assert category_label(None) == "unknown"
        assert category_label(42) == "unknown"


class TestLocationVariants:
    """Tests for the tagged location union."""

    def test_discriminator_picks_variant(self):
        """Test the category tag selects the right model."""
        adapter = TypeAdapter(Location)
        location = adapter.validate_python({"category": "trailor", "tag": "XYZ"})
        assert isinstance(location, TrailerLocation)
        assert location.tag == "XYZ"

    def test_variant_carries_only_its_field(self):
        """Test a slip location has no trailer tag."""
        location = SlipLocation(slip_number=5)
        assert not hasattr(location, "tag")
        assert location.category == LocationCategory.SLIP

    def test_value_tokens(self):
        """Test each variant renders its file field."""
        assert SlipLocation(slip_number=27).value_token() == "27"
        assert LandLocation(bay_label="C").value_token() == "C"
        assert TrailerLocation(tag="ABC123").value_token() == "ABC123"
        assert StorageLocation(spot=7).value_token() == "7"

    def test_land_label_is_one_character(self):
        """Test bay labels longer than one character are rejected."""
        with pytest.raises(ValidationError):
            LandLocation(bay_label="AB")

    def test_trailer_tag_length_limit(self):
        """Test tags over nine characters are rejected by the model."""
        with pytest.raises(ValidationError):
            TrailerLocation(tag="ABCDEFGHIJ")

    def test_ranges_are_not_enforced(self):
        """Test out-of-range slip and storage numbers are accepted."""
        assert SlipLocation(slip_number=200).slip_number == 200
        assert StorageLocation(spot=0).spot == 0


class TestVessel:
    """Tests for the Vessel model."""

    def test_vessel_creation(self):
        """Test Vessel model creation."""
        vessel = Vessel(
            name="Big Brother",
            length_feet=Decimal("20"),
            location=SlipLocation(slip_number=27),
            outstanding_fees=Decimal("1200.00"),
        )
        assert vessel.name == "Big Brother"
        assert vessel.location_category == LocationCategory.SLIP
        assert vessel.sort_key == "big brother"

    def test_vessel_strips_whitespace(self):
        """Test that whitespace is stripped from the name."""
        vessel = Vessel(
            name="  Pirate  ",
            length_feet=Decimal("23"),
            location=TrailerLocation(tag="ABC"),
        )
        assert vessel.name == "Pirate"
        assert vessel.outstanding_fees == Decimal("0")

    def test_vessel_rejects_empty_name(self):
        """Test an empty name is rejected."""
        with pytest.raises(ValidationError):
            Vessel(
                name="",
                length_feet=Decimal("10"),
                location=StorageLocation(spot=1),
            )

    def test_negative_fees_allowed(self):
        """Test balances are not forced to stay non-negative."""
        vessel = Vessel(
            name="Credit",
            length_feet=Decimal("10"),
            location=StorageLocation(spot=1),
            outstanding_fees=Decimal("-5.00"),
        )
        assert vessel.outstanding_fees == Decimal("-5.00")

    def test_location_from_dict(self):
        """Test the location union validates from plain data."""
        vessel = Vessel.model_validate({
            "name": "Moby Duck",
            "length_feet": "40",
            "location": {"category": "land", "bay_label": "C"},
        })
        assert isinstance(vessel.location, LandLocation)


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.VESSEL_ADDED,
            description="Vessel added",
        )
        assert event.event_type == AuditEventType.VESSEL_ADDED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.payment_recorded("Tiny", "2.00", "3.00")
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "payment_recorded"
        assert log_dict["entity_name"] == "Tiny"
        assert log_dict["details"]["balance"] == "3.00"

    def test_builder_record_skipped_is_debug(self):
        """Test skipped lines are logged below the operator's notice."""
        event = AuditEventBuilder.record_skipped(3, "Unknown location: 'dock'")
        assert event.severity == AuditSeverity.DEBUG
        assert event.details["line_number"] == 3
        assert event.is_user_action is False

    def test_builder_payment_rejected(self):
        """Test AuditEventBuilder.payment_rejected."""
        event = AuditEventBuilder.payment_rejected("Tiny", "5.00", "5.00")
        assert event.event_type == AuditEventType.PAYMENT_REJECTED
        assert event.severity == AuditSeverity.WARNING
        assert event.is_user_action is True

    @pytest.mark.parametrize(
        "build",
        [
            lambda text: AuditEventBuilder.vessel_not_found(text, "remove"),
            lambda text: AuditEventBuilder.vessel_removed(text),
            lambda text: AuditEventBuilder.payment_recorded(text, text, "0.00"),
            lambda text: AuditEventBuilder.payment_rejected(text, text, "0.00"),
            lambda text: AuditEventBuilder.fleet_loaded(text, 1, 0),
            lambda text: AuditEventBuilder.fleet_load_failed(text, "missing"),
            lambda text: AuditEventBuilder.fleet_saved(text, 1),
            lambda text: AuditEventBuilder.fleet_save_failed(text, "disk full"),
        ],
    )
    def test_builders_accept_long_operator_text(self, build):
        """Test names, amounts and paths of any length fit in an event."""
        long_text = "N" * 600
        event = build(long_text)
        assert long_text not in event.description
        assert event.entity_name == long_text

    def test_timestamp_is_timezone_aware(self):
        """Test event timestamps carry UTC."""
        event = AuditEventBuilder.vessel_removed("Tiny")
        assert event.timestamp.utcoffset() is not None
        assert event.timestamp.utcoffset().total_seconds() == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
