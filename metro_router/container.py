"""Wiring of the default adapters into a ``RouteQueryService``.

The application has one service and two adapters, so plain factory
functions stand in for a container: each takes the configuration and
returns a ready-to-use object. Tests pass their own config or adapters.
"""

from __future__ import annotations

from typing import Optional

from .adapters.graph import DijkstraRouteSolver, TextGraphRepository
from .config import AppConfig, get_config
from .ports.graph import GraphRepositoryPort, RouteSolverPort
from .services import RouteQueryService


def create_graph_repository(config: Optional[AppConfig] = None) -> TextGraphRepository:
    config = config or get_config()
    return TextGraphRepository(config.graph)


def create_route_solver(
    config: Optional[AppConfig] = None,
    strategy: Optional[str] = None,
) -> DijkstraRouteSolver:
    """Solver for ``strategy``, or for the configured one when omitted.

    Raises:
        ConfigurationError: If the strategy is unknown.
    """
    config = config or get_config()
    return DijkstraRouteSolver(strategy=strategy or config.solver.strategy)


def create_route_service(
    config: Optional[AppConfig] = None,
    *,
    graph_repository: Optional[GraphRepositoryPort] = None,
    route_solver: Optional[RouteSolverPort] = None,
) -> RouteQueryService:
    """Build the route service, filling in default adapters from config.

    Args:
        config: Application configuration; defaults to ``get_config()``.
        graph_repository: Repository to use instead of the text-file one.
        route_solver: Solver to use instead of the configured Dijkstra.

    Returns:
        A RouteQueryService ready to answer queries.
    """
    config = config or get_config()
    return RouteQueryService(
        graph_repository=graph_repository or create_graph_repository(config),
        route_solver=route_solver or create_route_solver(config),
    )
