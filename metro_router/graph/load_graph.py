"""Graph loading from plain-text files.

The station file holds one station name per line; its line order defines
the station indices. The edge file holds one undirected edge per line::

    <station name A>,<station name B>,<integer weight>

Loading is all-or-nothing: the first bad line aborts the whole load and
no ``GraphStore`` is produced.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Mapping, Tuple, Union

from ..domain.errors import (
    InvalidWeightError,
    MalformedEdgeError,
    SourceNotFoundError,
    UnknownStationError,
)
from ..domain.models import AdjacencyMatrix, Edge
from .store import GraphStore, first_index_by_name

PathLike = Union[str, Path]

_WEIGHT_PATTERN = re.compile(r"\+?[0-9]+")


def _read_lines(path: PathLike) -> List[Tuple[int, str]]:
    """Read ``(line_number, text)`` pairs, line endings stripped."""
    try:
        # utf-8-sig tolerates a leading BOM
        with Path(path).open(encoding="utf-8-sig") as f:
            return [
                (line_number, raw.rstrip("\r\n"))
                for line_number, raw in enumerate(f, start=1)
            ]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceNotFoundError(
            f"Cannot read data file {path}",
            cause=e,
            file_path=str(path),
        )


def read_station_names(path: PathLike) -> List[str]:
    """Read station names in file order, dropping trailing blank lines.

    Names are kept exactly as written: no trimming, no case folding.
    """
    names = [text for _, text in _read_lines(path)]
    while names and not names[-1].strip():
        names.pop()
    return names


def parse_edge_line(
    line: str,
    index_by_name: Mapping[str, int],
    *,
    file_path: str = "",
    line_number: int = 0,
) -> Edge:
    """Parse one ``name_a,name_b,weight`` line into an ``Edge``.

    Raises:
        MalformedEdgeError: If the line does not have three fields.
        UnknownStationError: If either name is not a known station.
        InvalidWeightError: If the weight is not a non-negative integer.
    """
    fields = line.split(",")
    if len(fields) != 3:
        raise MalformedEdgeError(
            f"Expected 'station,station,weight' at line {line_number}, got {line!r}",
            file_path=file_path,
            line_number=line_number,
            raw_line=line,
        )

    name_a, name_b, raw_weight = fields
    indices = []
    for name in (name_a, name_b):
        if name not in index_by_name:
            raise UnknownStationError(
                f"Unknown station {name!r} at line {line_number}",
                file_path=file_path,
                line_number=line_number,
                station_name=name,
            )
        indices.append(index_by_name[name])

    weight_text = raw_weight.strip()
    if not _WEIGHT_PATTERN.fullmatch(weight_text):
        reason = "negative" if weight_text.startswith("-") else "not an integer"
        raise InvalidWeightError(
            f"Invalid weight {raw_weight!r} at line {line_number}: {reason}",
            file_path=file_path,
            line_number=line_number,
            raw_weight=raw_weight,
        )

    return Edge(source=indices[0], target=indices[1], weight=int(weight_text))


def iter_edges(path: PathLike, index_by_name: Mapping[str, int]) -> Iterator[Edge]:
    """Yield the edges of an edge file, skipping blank lines."""
    for line_number, text in _read_lines(path):
        if not text.strip():
            continue
        yield parse_edge_line(
            text,
            index_by_name,
            file_path=str(path),
            line_number=line_number,
        )


def load_graph_store(stations_path: PathLike, edges_path: PathLike) -> GraphStore:
    """Load the metro network from a station file and an edge file.

    Args:
        stations_path: File with one station name per line.
        edges_path: File with one ``name_a,name_b,weight`` edge per line.

    Returns:
        A fully built, immutable ``GraphStore``.

    Raises:
        SourceNotFoundError: If either file is missing or unreadable.
        UnknownStationError: If an edge names a station not in the list.
        InvalidWeightError: If an edge weight is not a non-negative integer.
        MalformedEdgeError: If an edge line does not have three fields.
    """
    names = read_station_names(stations_path)
    index_by_name = first_index_by_name(names)

    # Materialize every edge before building anything so a bad line
    # leaves nothing behind.
    edges = list(iter_edges(edges_path, index_by_name))

    adjacency = AdjacencyMatrix.from_edges(len(names), edges)
    return GraphStore.from_names(names, adjacency)
