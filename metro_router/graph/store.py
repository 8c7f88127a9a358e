"""In-memory metro network: station registry plus adjacency matrix.

``GraphStore`` is a pure lookup table. It never normalizes names; callers
are expected to apply whatever case or whitespace convention their data
files use before calling ``index_of``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from ..domain.errors import EmptyStationNameError, StationNotFoundError
from ..domain.models import AdjacencyMatrix, Station, Weight


def first_index_by_name(names: Sequence[str]) -> dict[str, int]:
    """Map each name to the index of its first occurrence."""
    index: dict[str, int] = {}
    for position, name in enumerate(names):
        index.setdefault(name, position)
    return index


@dataclass(frozen=True)
class GraphStore:
    """Immutable station registry and adjacency structure.

    Attributes:
        stations: Stations ordered by index
        adjacency: Symmetric N x N weight matrix with a zero diagonal
    """

    stations: Tuple[Station, ...]
    adjacency: AdjacencyMatrix
    _index_by_name: Mapping[str, int] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if len(self.stations) != self.adjacency.size:
            raise ValueError(
                f"{len(self.stations)} stations but a matrix of size {self.adjacency.size}"
            )
        for position, station in enumerate(self.stations):
            if station.index != position:
                raise ValueError(
                    f"Station {station.name!r} has index {station.index}, expected {position}"
                )
        names = [station.name for station in self.stations]
        object.__setattr__(
            self, "_index_by_name", MappingProxyType(first_index_by_name(names))
        )

    @classmethod
    def from_names(cls, names: Sequence[str], adjacency: AdjacencyMatrix) -> GraphStore:
        """Build a store from names ordered by index."""
        stations = tuple(Station(index=i, name=name) for i, name in enumerate(names))
        return cls(stations=stations, adjacency=adjacency)

    def index_of(self, name: str) -> int:
        """Resolve a station name to its index.

        The match is exact and case-sensitive. When a name appears more
        than once, the first index wins.

        Args:
            name: Station name as stored in the station file.

        Returns:
            The station index, in ``[0, station_count())``.

        Raises:
            EmptyStationNameError: If ``name`` is empty or blank.
            StationNotFoundError: If no station has this name.
        """
        if not name or not name.strip():
            raise EmptyStationNameError("Station name is empty")

        index = self._index_by_name.get(name)
        if index is None:
            raise StationNotFoundError(
                f"Station not found: {name}",
                station_name=name,
            )
        return index

    def station_count(self) -> int:
        return len(self.stations)

    def weight(self, i: int, j: int) -> Weight:
        """Direct edge weight between two stations, or ``NO_EDGE``."""
        return self.adjacency.weight(i, j)

    def station_name(self, index: int) -> str:
        """Name of the station at ``index``.

        Raises:
            IndexError: If ``index`` is outside ``[0, station_count())``.
        """
        if not 0 <= index < len(self.stations):
            raise IndexError(
                f"Station index {index} out of range for {len(self.stations)} stations"
            )
        return self.stations[index].name

    def __contains__(self, name: object) -> bool:
        return name in self._index_by_name

    def __len__(self) -> int:
        return len(self.stations)
