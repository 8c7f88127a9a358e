"""Typed domain errors for the Metro Router.

Load-time errors (``GraphLoadError`` and its subclasses) are fatal for the
process: no partially built graph is ever handed out. Lookup errors
(``StationLookupError`` and its subclasses) are local to a single query
and leave the loaded graph untouched.

An unreachable destination is not an error; see ``RouteResult``.

All errors inherit from MetroRouterError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MetroRouterError(Exception):
    """Base error for the metro router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphLoadError(MetroRouterError):
    """The network could not be built from its data files.

    Attributes:
        file_path: Path to the offending data file if relevant
        line_number: 1-based line number in that file if relevant
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class SourceNotFoundError(GraphLoadError):
    """A station or edge file is missing or unreadable."""


@dataclass
class UnknownStationError(GraphLoadError):
    """An edge references a station absent from the station list.

    Attributes:
        station_name: The name that could not be resolved
    """

    station_name: str = ""


@dataclass
class InvalidWeightError(GraphLoadError):
    """An edge weight is not a non-negative integer.

    Attributes:
        raw_weight: The weight field exactly as read
    """

    raw_weight: str = ""


@dataclass
class MalformedEdgeError(GraphLoadError):
    """An edge line does not have exactly three comma-separated fields.

    Attributes:
        raw_line: The offending line
    """

    raw_line: str = ""


@dataclass
class StationLookupError(MetroRouterError):
    """A station name could not be resolved to an index."""


@dataclass
class EmptyStationNameError(StationLookupError):
    """The station name to look up is empty or blank."""


@dataclass
class StationNotFoundError(StationLookupError):
    """No station with this name exists in the registry.

    Attributes:
        station_name: The name that was looked up
    """

    station_name: str = ""


@dataclass
class ConfigurationError(MetroRouterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
