"""High-level orchestration for the Metro Router.

The pipeline is organized in several stages:

1. Network loading (station and edge files to an immutable graph),
   done once at startup; a load failure stops the program.
2. Input acquisition (two station names typed in the terminal).
3. Station lookup and shortest-distance computation.

The stages are wired by ``container.create_route_service``; this module
only handles strategy selection and terminal input and output.

Run it with ``python -m metro_router.pipeline``.
"""

from __future__ import annotations

import sys
from typing import Dict, Optional

from .adapters.graph.dijkstra_solver import SOLVER_STRATEGIES, DistanceFn
from .config import AppConfig, get_config
from .container import create_route_service, create_route_solver
from .domain.errors import GraphLoadError
from .observability import configure_logging
from .services import RouteQueryService

# Path-finding strategies selectable by name, so front-ends can swap them
PATH_FINDER_STRATEGIES: Dict[str, DistanceFn] = dict(SOLVER_STRATEGIES)


def find_route(
    departure: str,
    arrival: str,
    path_name: Optional[str] = None,
    *,
    service: Optional[RouteQueryService] = None,
    config: Optional[AppConfig] = None,
) -> str:
    """Compute the route between two stations and return a message.

    This helper is designed to be reused from other front-ends
    (terminal loop, tests, a future GUI).

    Args:
        departure: Departure station name as typed by the user.
        arrival: Arrival station name as typed by the user.
        path_name: Key into PATH_FINDER_STRATEGIES; the configured
            strategy is used when omitted.
        service: Existing service to reuse (keeps its loaded network).
        config: Configuration used when no service is given.
    """
    if path_name is not None and path_name not in PATH_FINDER_STRATEGIES:
        return f"Unknown path-finding strategy: {path_name!r}"

    config = config or get_config()
    if service is None:
        service = create_route_service(config)
    if path_name is not None:
        service = RouteQueryService(
            graph_repository=service.graph_repository,
            route_solver=create_route_solver(config, strategy=path_name),
        )

    route, error = service.query_safe(departure, arrival)
    if route is None:
        return error or "Error: No result"
    return service.format_result(route)


def run_pipeline(config: Optional[AppConfig] = None) -> int:
    """Load the network, then answer queries until an empty departure.

    Returns:
        Process exit code.
    """
    config = config or get_config()
    configure_logging(config.observability)
    service = create_route_service(config)

    try:
        store = service.graph_repository.load()
    except GraphLoadError as e:
        print(f"Error: Network data could not be loaded ({e})")
        return 1

    print(f"=== Metro Router ({store.station_count()} stations) ===")
    while True:
        try:
            departure = input("Departure station (empty to quit): ")
            if not departure.strip():
                break
            arrival = input("Arrival station: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        print(find_route(departure, arrival, service=service, config=config))

    return 0


if __name__ == "__main__":
    sys.exit(run_pipeline())
