"""Services package."""

from marina.services.billing import (
    BillingEngine,
    BillingError,
    PaymentExceedsBalanceError,
)
from marina.services.storage import (
    CapacityExceededError,
    FleetStorageInterface,
    FleetStore,
    FlatFileFleetStorage,
    InMemoryFleetStorage,
    NotFoundError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

__all__ = [
    # Billing
    "BillingEngine",
    "BillingError",
    "PaymentExceedsBalanceError",
    # Storage services
    "CapacityExceededError",
    "FleetStorageInterface",
    "FleetStore",
    "FlatFileFleetStorage",
    "InMemoryFleetStorage",
    "NotFoundError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
]
