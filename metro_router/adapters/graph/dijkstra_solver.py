"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Domain model output (RouteResult)
- Strategy selection (dense matrix scan or binary heap)
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from ...domain.errors import ConfigurationError
from ...domain.models import AdjacencyMatrix, RouteResult
from ...graph.dijkstra import dijkstra, heap_dijkstra

DistanceFn = Callable[[AdjacencyMatrix, int, int], Optional[int]]

SOLVER_STRATEGIES: Dict[str, DistanceFn] = {
    "dense": dijkstra,
    "heap": heap_dijkstra,
}


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. It holds no per-query
    state, so one instance can serve concurrent queries.

    Attributes:
        strategy: Key into SOLVER_STRATEGIES
    """

    strategy: str = "dense"
    _distance_fn: DistanceFn = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        distance_fn = SOLVER_STRATEGIES.get(self.strategy)
        if distance_fn is None:
            raise ConfigurationError(
                f"Unknown solver strategy: {self.strategy!r}",
                setting_name="solver.strategy",
                expected_type=" | ".join(sorted(SOLVER_STRATEGIES)),
            )
        self._distance_fn = distance_fn

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
            RouteResult whose distance is None when no path exists.

        Raises:
            IndexError: If either index is outside the matrix.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target, "strategy": self.strategy},
        )

        distance = self._distance_fn(adjacency, source, target)
        result = RouteResult(source=source, target=target, distance=distance)

        if result.is_reachable:
            self._logger.debug(
                "Route found",
                extra={"source": source, "target": target, "distance": distance},
            )
        else:
            self._logger.info(
                "Target unreachable",
                extra={"source": source, "target": target},
            )
        return result
