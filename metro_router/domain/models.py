"""Immutable domain models for the Metro Router.

All models are frozen dataclasses with slots. The adjacency matrix is
stored as nested tuples, so once built nothing can mutate it and
concurrent queries can share it without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

# Marker for "no direct edge" inside the matrix. Solvers keep their own
# notion of an infinite distance label; the two are never added together.
NO_EDGE = None

Weight = Optional[int]


@dataclass(frozen=True, slots=True)
class Station:
    """A metro station.

    Attributes:
        index: Position in the station file (0-based), the internal identity
        name: Name exactly as read from the station file
    """

    index: int
    name: str


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected edge parsed from one line of the edge file.

    Attributes:
        source: Index of the first station
        target: Index of the second station
        weight: Travel time between them
    """

    source: int
    target: int
    weight: int

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {self.weight}")


@dataclass(frozen=True, slots=True)
class AdjacencyMatrix:
    """Dense, symmetric N x N table of edge weights.

    ``rows[i][j]`` is the weight of the edge between ``i`` and ``j`` or
    ``NO_EDGE``. The diagonal is always 0.
    """

    rows: Tuple[Tuple[Weight, ...], ...]

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Edge]) -> AdjacencyMatrix:
        """Build a matrix of ``size`` nodes from undirected edges.

        A later edge between the same pair overwrites an earlier one.
        """
        if size < 0:
            raise ValueError(f"Matrix size must be non-negative, got {size}")

        cells: list[list[Weight]] = [[NO_EDGE] * size for _ in range(size)]
        for edge in edges:
            cells[edge.source][edge.target] = edge.weight
            cells[edge.target][edge.source] = edge.weight

        for i in range(size):
            cells[i][i] = 0

        return cls(rows=tuple(tuple(row) for row in cells))

    @property
    def size(self) -> int:
        """Number of nodes."""
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def weight(self, i: int, j: int) -> Weight:
        """Weight of the direct edge between ``i`` and ``j``, or ``NO_EDGE``.

        Raises:
            IndexError: If either index is outside ``[0, size)``.
        """
        self._check_index(i)
        self._check_index(j)
        return self.rows[i][j]

    def has_edge(self, i: int, j: int) -> bool:
        """Check whether a direct edge (or the zero diagonal) exists."""
        return self.weight(i, j) is not NO_EDGE

    def neighbors(self, i: int) -> Iterator[Tuple[int, int]]:
        """Yield ``(j, weight)`` for every direct neighbour of ``i``."""
        self._check_index(i)
        for j, weight in enumerate(self.rows[i]):
            if j != i and weight is not NO_EDGE:
                yield j, weight

    def is_symmetric(self) -> bool:
        """Check that ``weight(i, j) == weight(j, i)`` for every pair."""
        n = self.size
        return all(
            self.rows[i][j] == self.rows[j][i] for i in range(n) for j in range(i + 1, n)
        )

    def _check_index(self, index: int) -> None:
        # Negative indices would silently wrap around on a tuple.
        if not 0 <= index < len(self.rows):
            raise IndexError(
                f"Station index {index} out of range for {len(self.rows)} stations"
            )


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-distance query between two stations.

    Attributes:
        source: Index of the departure station
        target: Index of the arrival station
        distance: Minimum total weight, or None when no path exists
    """

    source: int
    target: int
    distance: Optional[int]

    @property
    def is_reachable(self) -> bool:
        """Check whether a path between source and target exists."""
        return self.distance is not None
