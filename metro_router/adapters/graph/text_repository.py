"""Text-file Graph Repository adapter.

This adapter wraps graph/load_graph.py and adds:
- Configuration injection (paths from config)
- Caching of the loaded network
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...graph.load_graph import load_graph_store
from ...graph.store import GraphStore


@dataclass
class TextGraphRepository:
    """Graph repository that loads from the station and edge text files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _store: Optional[GraphStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the metro network from the configured files.

        Returns:
            The immutable station registry and adjacency matrix.

        Raises:
            GraphLoadError: If the network cannot be built. Nothing is
                cached in that case.
        """
        if self._store is not None:
            return self._store

        self._logger.debug(
            "Loading graph",
            extra={
                "stations_path": str(self.config.stations_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        try:
            store = load_graph_store(self.config.stations_path, self.config.edges_path)
        except GraphLoadError as e:
            self._logger.error(
                "Graph load failed",
                extra={
                    "error_type": type(e).__name__,
                    "file_path": e.file_path,
                    "line_number": e.line_number,
                },
            )
            raise

        self._store = store
        self._logger.info(
            "Graph loaded",
            extra={"stations": store.station_count()},
        )
        return store

    def clear_cache(self) -> None:
        """Drop the cached network so the next load re-reads the files."""
        self._store = None
        self._logger.debug("Graph cache cleared")
