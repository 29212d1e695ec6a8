"""Data classes for aircraft route calculation.

This module contains dataclasses that represent aircraft characteristics,
waypoints, sampled flight states, and configuration objects used
throughout the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from route_calc.constants import GeodesyConstants, IntegrationConstants
from route_calc.types import InterpolationMode


@dataclass(frozen=True)
class AircraftCharacteristics:
    """Performance envelope of an aircraft.

    Only the maximum acceleration shapes segment integration. The remaining
    limits are carried for validation and future turn/climb modeling.
    """

    maximum_speed_meters_per_second: float
    maximum_acceleration_meters_per_second_squared: float
    altitude_change_rate_meters_per_second: float
    course_change_rate_degrees_per_second: float


@dataclass(frozen=True)
class WayPoint:
    """Navigational node the route must pass through exactly."""

    latitude_degrees: float
    longitude_degrees: float
    altitude_meters: float
    speed_meters_per_second: float


@dataclass(frozen=True)
class FlightState:
    """One sampled instant of a computed route.

    All units are in degrees, meters, and meters/second unless otherwise noted.
    """

    latitude_degrees: float
    longitude_degrees: float
    altitude_meters: float
    speed_meters_per_second: float
    course_degrees: float

    def to_output_array(self, current_time_seconds: float) -> NDArray[np.floating[Any]]:
        """Convert state to output array format for recording.

        Args:
            current_time_seconds: Elapsed route time of this sample in seconds.

        Returns:
            Array containing [time, latitude, longitude, altitude, speed, course].
        """
        return np.array(
            [
                current_time_seconds,
                self.latitude_degrees,
                self.longitude_degrees,
                self.altitude_meters,
                self.speed_meters_per_second,
                self.course_degrees,
            ]
        )

    @classmethod
    def from_waypoint(cls, waypoint: WayPoint, course_degrees: float) -> FlightState:
        """Create the flight state that sits exactly on a waypoint."""
        return cls(
            latitude_degrees=waypoint.latitude_degrees,
            longitude_degrees=waypoint.longitude_degrees,
            altitude_meters=waypoint.altitude_meters,
            speed_meters_per_second=waypoint.speed_meters_per_second,
            course_degrees=course_degrees,
        )


@dataclass(frozen=True)
class SegmentProfile:
    """Pre-computed quantities driving the integration of one segment.

    Rates are per integration step, which is one second.
    """

    distance_meters: float
    course_degrees: float
    flight_time_seconds: float
    speed_change_per_step: float
    altitude_change_per_step: float

    @property
    def is_stationary(self) -> bool:
        """Whether the segment has no flight time to integrate over."""
        return self.flight_time_seconds == 0.0

    @property
    def central_angle_radians(self) -> float:
        """Angle subtended by the segment at the Earth's center."""
        return self.distance_meters / GeodesyConstants.EARTH_RADIUS_METERS


@dataclass(frozen=True)
class RouteCalculationConfiguration:
    """Options controlling how segments are sampled."""

    interpolation_mode: InterpolationMode = InterpolationMode.LINEAR
    maximum_segment_flight_time_seconds: float = IntegrationConstants.MAXIMUM_SEGMENT_FLIGHT_TIME_SECONDS
