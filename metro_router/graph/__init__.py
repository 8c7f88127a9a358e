"""Graph-related utilities for representing the metro network.

This subpackage contains modules to build an in-memory graph from the
station and edge files and to run shortest-path algorithms on it.
"""

from .dijkstra import dijkstra, heap_dijkstra
from .load_graph import load_graph_store
from .store import GraphStore

__all__ = ["GraphStore", "load_graph_store", "dijkstra", "heap_dijkstra"]
