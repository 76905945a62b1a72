"""
In-Memory Fleet Store

The fleet is a plain list of Vessel records kept sorted by name,
case-insensitively, after every change. It is small (120 boats at most)
so every insert simply appends and re-sorts.

Removal deletes from the list; later boats shift down one place and the
order is preserved without a re-sort.

DESIGN DECISION: Names are not unique. A second "Sea Breeze" is accepted,
and from then on lookups by that name find whichever sorts first.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import structlog

from marina.config import get_settings
from marina.models.vessel import Vessel
from marina.services.storage.interface import CapacityExceededError, NotFoundError
from marina.validation.line_codec import RecordError, parse_line


logger = structlog.get_logger(__name__)


@dataclass
class SkippedLine:
    line_number: int
    reason: str


@dataclass
class LoadResult:
    """Outcome of a bulk load. Skipped lines are for logging only."""
    loaded: int
    skipped: list[SkippedLine]

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class FleetStore:
    """
    Ordered, capacity-bounded collection of vessels.

    Owned by a single session; callers must not hold on to positions
    across changes, since inserts and removals move boats around.
    """

    def __init__(self, capacity: Optional[int] = None):
        if capacity is None:
            capacity = get_settings().fleet.max_vessels
        self._capacity = capacity
        self._vessels: list[Vessel] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._vessels) >= self._capacity

    def __len__(self) -> int:
        return len(self._vessels)

    def __iter__(self) -> Iterator[Vessel]:
        return iter(self.all())

    def _sort(self) -> None:
        self._vessels.sort(key=lambda vessel: vessel.sort_key)

    def load_all(self, lines: Iterable[str]) -> LoadResult:
        """
        Replace the fleet with every line that parses.

        Lines that fail to parse are skipped and the load carries on.
        Reading stops as soon as the fleet is full; anything after that
        is never looked at.
        """
        vessels: list[Vessel] = []
        skipped: list[SkippedLine] = []

        for line_number, line in enumerate(lines, start=1):
            if len(vessels) >= self._capacity:
                logger.warning(
                    "fleet_capacity_reached_during_load",
                    capacity=self._capacity,
                    stopped_at_line=line_number,
                )
                break
            try:
                vessels.append(parse_line(line))
            except RecordError as e:
                skipped.append(SkippedLine(line_number=line_number, reason=str(e)))

        self._vessels = vessels
        self._sort()
        return LoadResult(loaded=len(vessels), skipped=skipped)

    def insert(self, vessel: Vessel) -> None:
        """
        Add a vessel and restore name order.

        Raises:
            CapacityExceededError: If the fleet is already full
        """
        if self.is_full:
            raise CapacityExceededError(self._capacity)
        self._vessels.append(vessel)
        self._sort()

    def _index_of(self, name: str) -> int:
        wanted = name.lower()
        for idx, vessel in enumerate(self._vessels):
            if vessel.name.lower() == wanted:
                return idx
        raise NotFoundError(name)

    def find_by_name(self, name: str) -> Vessel:
        """
        First vessel whose name matches, ignoring case.

        Raises:
            NotFoundError: If no vessel has that name
        """
        return self._vessels[self._index_of(name)]

    def remove_by_name(self, name: str) -> Vessel:
        """
        Remove and return the first vessel whose name matches.

        Raises:
            NotFoundError: If no vessel has that name (fleet unchanged)
        """
        return self._vessels.pop(self._index_of(name))

    def all(self) -> tuple[Vessel, ...]:
        """Snapshot of the fleet in name order."""
        return tuple(self._vessels)
