"""Shared fixtures for the Marina Boat Manager tests."""

from decimal import Decimal

import pytest

from marina.audit import AuditLogger
from marina.config import get_settings
from marina.models.vessel import (
    LandLocation,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
)
from marina.orchestrator import MarinaSession
from marina.services.billing import BillingEngine
from marina.services.storage import FleetStore, InMemoryFleetStorage


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Every test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_vessel():
    def _make(
        name: str = "Sea Breeze",
        length: str = "30",
        location=None,
        fees: str = "0.00",
    ) -> Vessel:
        return Vessel(
            name=name,
            length_feet=Decimal(length),
            location=location or SlipLocation(slip_number=12),
            outstanding_fees=Decimal(fees),
        )
    return _make


@pytest.fixture
def mixed_fleet(make_vessel) -> FleetStore:
    store = FleetStore(capacity=120)
    store.insert(make_vessel("Pirate", "23", TrailerLocation(tag="ABC123"), "0.00"))
    store.insert(make_vessel("Big Brother", "20", SlipLocation(slip_number=27), "1200.00"))
    store.insert(make_vessel("Moby Duck", "40", LandLocation(bay_label="C"), "52.00"))
    store.insert(make_vessel("Tiny", "10", StorageLocation(spot=7), "5.00"))
    return store


@pytest.fixture
def sample_lines() -> list[str]:
    return [
        "Big Brother,20,slip,27,1200.00",
        "Pirate,23,trailor,ABC123,0.00",
        "Moby Duck,40,land,C,52.00",
        "Tiny,10,storage,7,5.00",
    ]


@pytest.fixture
def session(sample_lines) -> MarinaSession:
    storage = InMemoryFleetStorage(sample_lines)
    session = MarinaSession(
        storage=storage,
        store=FleetStore(capacity=120),
        billing=BillingEngine(),
        audit_logger=AuditLogger(),
    )
    session.load()
    return session
