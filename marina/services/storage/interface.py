"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for the backing store.
This allows us to:
1. Swap the flat text file for something else later
2. Use in-memory storage for testing
3. Keep fleet logic decoupled from where the lines live

The interface is intentionally simple: the whole fleet is read once at
startup and written once at shutdown, so it deals in lines, not records.
"""

from abc import ABC, abstractmethod
from typing import Iterable


class FleetStorageInterface(ABC):
    """
    Abstract interface for fleet persistence.

    Any backend (flat file, in-memory, ...) must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the data lives."""
        pass

    @abstractmethod
    def read_lines(self) -> list[str]:
        """
        Read every stored record line, in stored order.

        Returns:
            Lines without their trailing newline

        Raises:
            StorageReadError: If the backing store cannot be read
        """
        pass

    @abstractmethod
    def write_lines(self, lines: Iterable[str]) -> int:
        """
        Replace the stored records with the given lines.

        Args:
            lines: Record lines without trailing newline

        Returns:
            Number of lines written

        Raises:
            StorageWriteError: If the backing store cannot be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """No vessel with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No boat with that name: {name!r}")


class CapacityExceededError(StorageError):
    """The fleet is already at its maximum size."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Maximum capacity reached ({capacity} vessels)")


class StorageReadError(StorageError):
    """Could not read the backing store."""
    pass


class StorageWriteError(StorageError):
    """Could not write the backing store."""
    pass
