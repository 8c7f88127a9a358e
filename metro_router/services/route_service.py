"""Route query service - Boundary between a front-end and the core.

A front-end hands over two raw strings typed by the user. This service
normalizes them (the station file stores upper-case names), resolves
them against the loaded network and asks the solver for the distance.
It is the only place where user input conventions are applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import (
    EmptyStationNameError,
    GraphLoadError,
    StationLookupError,
    StationNotFoundError,
)
from ..domain.models import RouteResult
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


def normalize_station_name(raw: str) -> str:
    """Trim surrounding whitespace and upper-case a user-typed name."""
    return raw.strip().upper()


@dataclass
class RouteQueryService:
    """Answers shortest-travel-time queries between two named stations.

    Attributes:
        graph_repository: Loads the metro network
        route_solver: Computes shortest distances
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def query(self, departure: str, arrival: str) -> RouteResult:
        """Compute the shortest travel time between two stations.

        Args:
            departure: Departure station name as typed by the user.
            arrival: Arrival station name as typed by the user.

        Returns:
            RouteResult; its distance is None when no path exists.

        Raises:
            GraphLoadError: If the network cannot be loaded.
            EmptyStationNameError: If either name is blank.
            StationNotFoundError: If either name is not a known station.
        """
        store = self.graph_repository.load()

        try:
            source = store.index_of(normalize_station_name(departure))
            target = store.index_of(normalize_station_name(arrival))
        except StationLookupError as e:
            self._logger.warning(
                "Station lookup failed",
                extra={"error_type": type(e).__name__, "error": e.message},
            )
            raise

        route = self.route_solver.solve(store.adjacency, source, target)
        self._logger.info(
            "Route computed",
            extra={
                "departure": store.station_name(source),
                "arrival": store.station_name(target),
                "distance": route.distance,
            },
        )
        return route

    def query_safe(
        self, departure: str, arrival: str
    ) -> tuple[Optional[RouteResult], Optional[str]]:
        """Compute a route, returning an error message instead of raising.

        Args:
            departure: Departure station name as typed by the user.
            arrival: Arrival station name as typed by the user.

        Returns:
            Tuple of (RouteResult or None, error message or None).
        """
        try:
            return self.query(departure, arrival), None
        except EmptyStationNameError:
            return None, "Error: Please fill in both stations"
        except StationNotFoundError as e:
            return None, f"Error: Station '{e.station_name}' not found"
        except GraphLoadError as e:
            return None, f"Error: Network data could not be loaded ({e})"

    def format_result(self, route: RouteResult) -> str:
        """Format a route result as a human-readable string."""
        if not route.is_reachable:
            return "No route between these stations"
        return f"Shortest travel time: {route.distance} min"
