"""Constants and configuration values for aircraft route calculation.

This module contains all constant values organized by domain,
following the Single Responsibility Principle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final


class GeodesyConstants:
    """Spherical Earth model used by the geodesy functions."""

    EARTH_RADIUS_METERS: Final[float] = 6_371_000.0
    FULL_CIRCLE_DEGREES: Final[float] = 360.0
    # Below this sine of the central angle the great circle through two points is undefined.
    DEGENERATE_ARC_SINE_TOLERANCE: Final[float] = 1e-12


class IntegrationConstants:
    """Constants controlling the fixed-step segment integration."""

    TIME_STEP_SECONDS: Final[float] = 1.0
    # Upper bound on a single segment's estimated flight time (one day).
    MAXIMUM_SEGMENT_FLIGHT_TIME_SECONDS: Final[float] = 86_400.0


class FileExportLimits:
    """Limits for file export operations."""

    MAXIMUM_CSV_ROWS_PER_FILE: Final[int] = 1_000_000


class WaypointFileColumns:
    """Column names expected in waypoint CSV files."""

    LATITUDE: Final[str] = "latitude_degrees"
    LONGITUDE: Final[str] = "longitude_degrees"
    ALTITUDE: Final[str] = "altitude_meters"
    SPEED: Final[str] = "speed_meters_per_second"

    @classmethod
    def required_columns(cls) -> list[str]:
        """Return the columns every waypoint file must contain, in order."""
        return [cls.LATITUDE, cls.LONGITUDE, cls.ALTITUDE, cls.SPEED]


# Default output directory for all generated files
DEFAULT_OUTPUT_DIRECTORY: Final[Path] = Path("output")

# Packaged waypoint file used by the demo script
DEMO_ROUTE_FILENAME: Final[str] = "demo_route.csv"
