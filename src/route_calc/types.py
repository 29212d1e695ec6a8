"""Type definitions and enumerations for aircraft route calculation.

This module contains type definitions, enumerations, and protocols
that define the interfaces used throughout the package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, TypedDict

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from collections.abc import Sequence


class InterpolationMode(Enum):
    """Strategies for placing intermediate positions along a segment."""

    LINEAR = "linear"
    GREAT_CIRCLE = "great_circle"


class GeographicPosition(Protocol):
    """Anything with a latitude and longitude in degrees."""

    @property
    def latitude_degrees(self) -> float: ...

    @property
    def longitude_degrees(self) -> float: ...


class RouteResultData(TypedDict):
    """Type definition for a computed route projected into time series.

    Distances and altitudes are in meters, speeds in meters/second, angles in degrees.
    Time is the emission index of each sample, one sample per second.
    """

    time_seconds: NDArray[np.floating[Any]]
    latitude_degrees: NDArray[np.floating[Any]]
    longitude_degrees: NDArray[np.floating[Any]]
    altitude_meters: NDArray[np.floating[Any]]
    speed_meters_per_second: NDArray[np.floating[Any]]
    course_degrees: NDArray[np.floating[Any]]


class RouteResultExporterInterface(ABC):
    """Abstract base class for route result exporters.

    Follows Open/Closed Principle - open for extension, closed for modification.
    """

    @abstractmethod
    def export_routes(
        self,
        route_results: Sequence[RouteResultData],
        output_filename_base: str,
        output_directory: Path | None = None,
        route_names: Sequence[str] | None = None,
    ) -> Path | list[Path]:
        """Export route results to file(s).

        Args:
            route_results: Sequence of route result dictionaries.
            output_filename_base: Base filename for output.
            output_directory: Directory to save files in.
            route_names: Identifier written with each route.

        Returns:
            Path or list of paths to created file(s).
        """
        ...


class RouteValidatorInterface(ABC):
    """Abstract base class for route validation strategies."""

    @abstractmethod
    def validate_route(self, route_result: RouteResultData) -> bool:
        """Validate a computed route against constraints.

        Args:
            route_result: Route result to validate.

        Returns:
            True if route is valid, False otherwise.
        """
        ...
