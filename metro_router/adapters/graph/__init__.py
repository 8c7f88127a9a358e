"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads the network from the station and edge files
- DijkstraRouteSolver: Finds shortest distances using Dijkstra's algorithm
"""

from .dijkstra_solver import SOLVER_STRATEGIES, DijkstraRouteSolver
from .text_repository import TextGraphRepository

__all__ = ["TextGraphRepository", "DijkstraRouteSolver", "SOLVER_STRATEGIES"]
