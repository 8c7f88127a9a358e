"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to its data files and algorithms:
- Graph storage (station and edge text files)
- Route solving (Dijkstra, dense or heap-based)
"""
