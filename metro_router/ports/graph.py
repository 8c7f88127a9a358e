"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the metro network and computing shortest distances.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import AdjacencyMatrix, RouteResult
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for loading and caching the
    metro network from its data files.
    """

    def load(self) -> GraphStore:
        """Load the metro network.

        Returns:
            The immutable station registry and adjacency matrix.

        Raises:
            GraphLoadError: If the network cannot be built.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes the shortest distance through the network.
    Implementations must not keep state between calls.
    """

    def solve(
        self,
        adjacency: AdjacencyMatrix,
        source: int,
        target: int,
    ) -> RouteResult:
        """Find the shortest distance between two stations.

        Args:
            adjacency: The network's weight matrix.
            source: Departure station index.
            target: Arrival station index.

        Returns:
            RouteResult whose distance is None when unreachable.
        """
        ...
