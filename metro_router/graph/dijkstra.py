"""Shortest-distance computation using Dijkstra's algorithm.

Two interchangeable implementations share one contract: given an
``AdjacencyMatrix`` and two station indices, return the minimum total
weight between them, or ``None`` when the target cannot be reached.

``dijkstra`` is the classic O(N^2) dense-matrix variant: each round scans
for the closest unvisited station, lowest index first on ties.
``heap_dijkstra`` uses a binary heap and is there for larger networks.
"""

import heapq
import math
from typing import List, Optional, Set, Tuple

from ..domain.models import NO_EDGE, AdjacencyMatrix

INFINITY = math.inf


def _initial_distances(size: int, source: int) -> List[float]:
    distances = [INFINITY] * size
    distances[source] = 0
    return distances


def _closest_unvisited(distances: List[float], visited: List[bool]) -> int:
    """Index of the unvisited node with the smallest finite label, or -1."""
    best_index = -1
    best_distance = INFINITY
    for i, distance in enumerate(distances):
        # Strict comparison keeps the lowest index on ties.
        if not visited[i] and distance < best_distance:
            best_index = i
            best_distance = distance
    return best_index


def _relax_neighbors(
    adjacency: AdjacencyMatrix,
    distances: List[float],
    visited: List[bool],
    current: int,
) -> None:
    base = distances[current]
    if base == INFINITY:
        return
    for j, weight in enumerate(adjacency.rows[current]):
        if visited[j] or weight is NO_EDGE:
            continue
        candidate = base + weight
        if candidate < distances[j]:
            distances[j] = candidate


def _check_endpoints(adjacency: AdjacencyMatrix, source: int, target: int) -> None:
    size = adjacency.size
    for name, index in (("source", source), ("target", target)):
        if not 0 <= index < size:
            raise IndexError(f"{name} index {index} out of range for {size} stations")


def dijkstra(adjacency: AdjacencyMatrix, source: int, target: int) -> Optional[int]:
    """Compute the shortest distance between two stations.

    Parameters
    ----------
    adjacency:
        Symmetric weight matrix as held by ``GraphStore``.
    source:
        Index of the departure station.
    target:
        Index of the arrival station.

    Returns
    -------
    int or None
        The minimum total weight from ``source`` to ``target``, ``0`` when
        they are the same station, ``None`` if no path exists.
    """
    _check_endpoints(adjacency, source, target)

    size = adjacency.size
    distances = _initial_distances(size, source)
    visited = [False] * size

    for _ in range(size):
        current = _closest_unvisited(distances, visited)
        if current == -1:
            # Everything left is disconnected from the source.
            continue
        visited[current] = True
        _relax_neighbors(adjacency, distances, visited, current)

    result = distances[target]
    if result == INFINITY:
        return None
    return int(result)


def heap_dijkstra(adjacency: AdjacencyMatrix, source: int, target: int) -> Optional[int]:
    """Same contract as ``dijkstra``, driven by a binary heap.

    Stops as soon as ``target`` is settled.
    """
    _check_endpoints(adjacency, source, target)

    distances = _initial_distances(adjacency.size, source)
    heap: List[Tuple[float, int]] = [(0, source)]
    visited: Set[int] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == target:
            break

        for v, weight in adjacency.neighbors(u):
            if v in visited:
                continue
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                heapq.heappush(heap, (new_distance, v))

    result = distances[target]
    if result == INFINITY:
        return None
    return int(result)
