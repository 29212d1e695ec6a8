"""Great-circle geodesy on a spherical Earth.

Scalar functions use the math module, which is significantly faster than
numpy for single values. The vectorized distance is used when whole route
series are checked at once.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from route_calc.constants import GeodesyConstants
from route_calc.utilities import interpolate_linearly

if TYPE_CHECKING:
    from route_calc.types import GeographicPosition


def calculate_great_circle_distance(start: GeographicPosition, end: GeographicPosition) -> float:
    """Calculate the haversine distance between two positions.

    Coordinates are not range-checked; values outside [-90, 90] and
    [-180, 180] propagate through the formula.

    Args:
        start: Start position in degrees.
        end: End position in degrees.

    Returns:
        Great-circle distance in meters.
    """
    start_latitude = math.radians(start.latitude_degrees)
    end_latitude = math.radians(end.latitude_degrees)
    latitude_difference = math.radians(end.latitude_degrees - start.latitude_degrees)
    longitude_difference = math.radians(end.longitude_degrees - start.longitude_degrees)

    haversine = (
        math.sin(latitude_difference / 2) ** 2
        + math.cos(start_latitude) * math.cos(end_latitude) * math.sin(longitude_difference / 2) ** 2
    )
    # Rounding can push the haversine just outside [0, 1] for antipodal or out-of-range points
    haversine = min(max(haversine, 0.0), 1.0)
    central_angle = 2 * math.atan2(math.sqrt(haversine), math.sqrt(1 - haversine))

    return GeodesyConstants.EARTH_RADIUS_METERS * central_angle


def calculate_initial_bearing(start: GeographicPosition, end: GeographicPosition) -> float:
    """Calculate the forward azimuth from start towards end.

    Args:
        start: Start position in degrees.
        end: End position in degrees.

    Returns:
        Bearing in degrees clockwise from north, in [0, 360).
    """
    start_latitude = math.radians(start.latitude_degrees)
    end_latitude = math.radians(end.latitude_degrees)
    longitude_difference = math.radians(end.longitude_degrees - start.longitude_degrees)

    east_component = math.sin(longitude_difference) * math.cos(end_latitude)
    north_component = math.cos(start_latitude) * math.sin(end_latitude) - math.sin(start_latitude) * math.cos(
        end_latitude
    ) * math.cos(longitude_difference)

    full_circle = GeodesyConstants.FULL_CIRCLE_DEGREES
    return (math.degrees(math.atan2(east_component, north_component)) + full_circle) % full_circle


def interpolate_great_circle_position(
    start: GeographicPosition,
    end: GeographicPosition,
    fraction: float,
    central_angle_radians: float | None = None,
) -> tuple[float, float]:
    """Find the point a given fraction of the way along the great circle.

    Coincident and antipodal endpoints have no unique great circle; for
    those the position is interpolated linearly in latitude and longitude.

    Args:
        start: Start position in degrees.
        end: End position in degrees.
        fraction: 0.0 at start, 1.0 at end.
        central_angle_radians: Angle between start and end, if already known.
            Computed from the haversine distance when not provided.

    Returns:
        Tuple of (latitude, longitude) in degrees.
    """
    central_angle = central_angle_radians
    if central_angle is None:
        central_angle = calculate_great_circle_distance(start, end) / GeodesyConstants.EARTH_RADIUS_METERS
    sine_central_angle = math.sin(central_angle)
    if abs(sine_central_angle) < GeodesyConstants.DEGENERATE_ARC_SINE_TOLERANCE:
        return (
            interpolate_linearly(start.latitude_degrees, end.latitude_degrees, fraction),
            interpolate_linearly(start.longitude_degrees, end.longitude_degrees, fraction),
        )

    start_latitude = math.radians(start.latitude_degrees)
    start_longitude = math.radians(start.longitude_degrees)
    end_latitude = math.radians(end.latitude_degrees)
    end_longitude = math.radians(end.longitude_degrees)

    start_weight = math.sin((1 - fraction) * central_angle) / sine_central_angle
    end_weight = math.sin(fraction * central_angle) / sine_central_angle

    x = start_weight * math.cos(start_latitude) * math.cos(start_longitude) + end_weight * math.cos(
        end_latitude
    ) * math.cos(end_longitude)
    y = start_weight * math.cos(start_latitude) * math.sin(start_longitude) + end_weight * math.cos(
        end_latitude
    ) * math.sin(end_longitude)
    z = start_weight * math.sin(start_latitude) + end_weight * math.sin(end_latitude)

    latitude = math.atan2(z, math.sqrt(x**2 + y**2))
    longitude = math.atan2(y, x)
    return math.degrees(latitude), math.degrees(longitude)


def calculate_great_circle_distances(
    start_latitudes_degrees: ArrayLike,
    start_longitudes_degrees: ArrayLike,
    end_latitudes_degrees: ArrayLike,
    end_longitudes_degrees: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """Vectorized haversine distance between paired positions.

    Inputs broadcast against each other, so a single destination can be
    compared with a whole series of positions.

    Returns:
        Array of distances in meters.
    """
    start_latitudes = np.radians(np.asarray(start_latitudes_degrees, dtype=float))
    end_latitudes = np.radians(np.asarray(end_latitudes_degrees, dtype=float))
    latitude_differences = end_latitudes - start_latitudes
    longitude_differences = np.radians(
        np.asarray(end_longitudes_degrees, dtype=float) - np.asarray(start_longitudes_degrees, dtype=float)
    )

    haversine = (
        np.sin(latitude_differences / 2) ** 2
        + np.cos(start_latitudes) * np.cos(end_latitudes) * np.sin(longitude_differences / 2) ** 2
    )
    haversine = np.clip(haversine, 0.0, 1.0)
    central_angles = 2 * np.arctan2(np.sqrt(haversine), np.sqrt(1 - haversine))

    return GeodesyConstants.EARTH_RADIUS_METERS * central_angles
