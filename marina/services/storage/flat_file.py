"""
Flat File Storage Implementation

DESIGN DECISION: The marina's data lives in a plain text file because:
1. The office can open and fix it in any text editor
2. No database setup required
3. Existing files from the old system load as-is

TRADEOFFS:
- The file is rewritten in full on every save
- No transactions: a crash before save loses the session's changes
- No header and no quoting, so a comma in a name corrupts that line

The implementation follows the abstract interface, so the fleet logic
does not care where the lines come from.
"""

from pathlib import Path
from typing import Iterable, Union

from marina.services.storage.interface import (
    FleetStorageInterface,
    StorageReadError,
    StorageWriteError,
)


class FlatFileFleetStorage(FleetStorageInterface):
    """
    Fleet stored one record per line in a UTF-8 text file.

    Every written line ends with a newline, including the last.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def read_lines(self) -> list[str]:
        """Read all record lines from the file."""
        try:
            with self._path.open("r", encoding=self._encoding) as fh:
                return [line.rstrip("\r\n") for line in fh]
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Could not open {self._path} for reading: {e}")

    def write_lines(self, lines: Iterable[str]) -> int:
        """Overwrite the file with the given record lines."""
        count = 0
        try:
            with self._path.open("w", encoding=self._encoding, newline="\n") as fh:
                for line in lines:
                    fh.write(f"{line}\n")
                    count += 1
        except OSError as e:
            raise StorageWriteError(f"Could not open file {self._path} for writing: {e}")
        return count


class InMemoryFleetStorage(FleetStorageInterface):
    """Line storage held in a list; used by tests and dry runs."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines = list(lines)

    @property
    def location(self) -> str:
        return "<memory>"

    def read_lines(self) -> list[str]:
        return list(self.lines)

    def write_lines(self, lines: Iterable[str]) -> int:
        self.lines = list(lines)
        return len(self.lines)
