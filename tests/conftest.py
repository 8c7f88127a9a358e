"""Shared fixtures for the Metro Router test suite."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

from metro_router.config import GraphConfig, reset_config

NetworkWriter = Callable[..., Tuple[Path, Path]]


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no cached config leaks between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo handlers and levels installed by configure_logging."""
    logger = logging.getLogger("metro_router")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def write_network(tmp_path: Path) -> NetworkWriter:
    """Write a station file and an edge file, return their paths."""

    def _write(
        stations: Iterable[str],
        edges: Iterable[str] = (),
        *,
        stations_text: str | None = None,
        edges_text: str | None = None,
    ) -> Tuple[Path, Path]:
        stations_path = tmp_path / "stations.txt"
        edges_path = tmp_path / "edges.txt"
        if stations_text is None:
            stations_text = "\n".join(stations) + "\n"
        if edges_text is None:
            edges_text = "".join(f"{line}\n" for line in edges)
        stations_path.write_text(stations_text, encoding="utf-8")
        edges_path.write_text(edges_text, encoding="utf-8")
        return stations_path, edges_path

    return _write


@pytest.fixture
def abc_network(write_network: NetworkWriter) -> Tuple[Path, Path]:
    """Three stations in a line: A -4- B -3- C."""
    return write_network(["A", "B", "C"], ["A,B,4", "B,C,3"])


@pytest.fixture
def graph_config(abc_network: Tuple[Path, Path]) -> GraphConfig:
    stations_path, edges_path = abc_network
    return GraphConfig(
        data_dir=stations_path.parent,
        stations_file=stations_path.name,
        edges_file=edges_path.name,
    )
