"""
Storage Services Package

Provides the abstract persistence interface, the flat text file backend,
and the in-memory fleet store the session works against.
"""

from marina.services.storage.interface import (
    CapacityExceededError,
    FleetStorageInterface,
    NotFoundError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from marina.services.storage.flat_file import (
    FlatFileFleetStorage,
    InMemoryFleetStorage,
)
from marina.services.storage.memory import (
    FleetStore,
    LoadResult,
    SkippedLine,
)

__all__ = [
    # Interfaces
    "FleetStorageInterface",
    # Exceptions
    "CapacityExceededError",
    "NotFoundError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Backends
    "FlatFileFleetStorage",
    "InMemoryFleetStorage",
    # Fleet store
    "FleetStore",
    "LoadResult",
    "SkippedLine",
]
