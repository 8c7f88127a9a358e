"""Top-level package for the Metro Router project.

This package loads a fixed, weighted, undirected metro network from two
plain-text files and answers "how long does it take to get from A to B"
queries with Dijkstra's algorithm.

The graph and solver live under ``metro_router.graph``; the ports,
adapters and services around them follow a hexagonal layout so that a
front-end only ever talks to ``RouteQueryService``.
"""
