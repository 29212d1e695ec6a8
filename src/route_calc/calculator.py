"""Route and segment calculation.

This module contains classes for deriving per-segment flight profiles from
pairs of waypoints and integrating them into sampled flight states.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from route_calc.constants import IntegrationConstants
from route_calc.data_classes import (
    AircraftCharacteristics,
    FlightState,
    RouteCalculationConfiguration,
    SegmentProfile,
    WayPoint,
)
from route_calc.exceptions import DegenerateSegmentError, InvalidWaypointSequenceError
from route_calc.geodesy import (
    calculate_great_circle_distance,
    calculate_initial_bearing,
    interpolate_great_circle_position,
)
from route_calc.types import InterpolationMode
from route_calc.utilities import interpolate_linearly

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class SegmentProfileCalculator:
    """Derives flight time and per-step rates for a segment."""

    def __init__(self, configuration: RouteCalculationConfiguration) -> None:
        """Initialize the profile calculator.

        Args:
            configuration: Route calculation options, including the flight time bound.
        """
        self.configuration = configuration
        self.time_step = IntegrationConstants.TIME_STEP_SECONDS

    def calculate_profile(
        self,
        start: WayPoint,
        end: WayPoint,
        characteristics: AircraftCharacteristics,
    ) -> SegmentProfile:
        """Calculate the profile of the segment between two waypoints.

        The speed ramp is capped from above by the maximum acceleration, but
        the flight time is not re-derived from the capped ramp. The ramp may
        therefore fall short of the end speed; the forced final sample of the
        integrator makes up the difference.

        Raises:
            DegenerateSegmentError: If the flight time cannot bound the integration.
        """
        distance = calculate_great_circle_distance(start, end)
        course = calculate_initial_bearing(start, end)
        flight_time = self.calculate_flight_time(distance, start, end)

        if flight_time == 0.0:
            return SegmentProfile(distance, course, 0.0, 0.0, 0.0)

        required_speed_change = (end.speed_meters_per_second - start.speed_meters_per_second) / flight_time
        speed_change = min(
            required_speed_change * self.time_step,
            characteristics.maximum_acceleration_meters_per_second_squared * self.time_step,
        )
        altitude_change = (end.altitude_meters - start.altitude_meters) / flight_time * self.time_step

        return SegmentProfile(
            distance_meters=distance,
            course_degrees=course,
            flight_time_seconds=flight_time,
            speed_change_per_step=speed_change,
            altitude_change_per_step=altitude_change,
        )

    def calculate_flight_time(self, distance: float, start: WayPoint, end: WayPoint) -> float:
        """Estimate segment flight time from the average of the waypoint speeds."""
        average_speed = (start.speed_meters_per_second + end.speed_meters_per_second) / 2
        if not math.isfinite(average_speed) or average_speed <= 0:
            raise DegenerateSegmentError(
                f"Average speed {average_speed} m/s between {start} and {end} is not positive",
                flight_time_seconds=math.inf,
            )

        flight_time = distance / average_speed
        maximum_flight_time = self.configuration.maximum_segment_flight_time_seconds
        if not math.isfinite(flight_time) or flight_time < 0 or flight_time > maximum_flight_time:
            raise DegenerateSegmentError(
                f"Flight time {flight_time} s between {start} and {end} is outside [0, {maximum_flight_time}] s",
                flight_time_seconds=flight_time,
            )
        return flight_time


class SegmentStateIntegrator:
    """Integrates a segment profile into flight states at a fixed time step."""

    def __init__(self, configuration: RouteCalculationConfiguration) -> None:
        """Initialize the integrator.

        Args:
            configuration: Route calculation options, including the interpolation mode.
        """
        self.configuration = configuration
        self.time_step = IntegrationConstants.TIME_STEP_SECONDS

    def integrate_segment(
        self,
        start: WayPoint,
        end: WayPoint,
        profile: SegmentProfile,
    ) -> list[FlightState]:
        """Sample the segment once per time step, then pin the end waypoint.

        Args:
            start: Segment start waypoint.
            end: Segment end waypoint.
            profile: Pre-computed segment profile.

        Returns:
            Flight states in chronological order; the last one equals the end waypoint.
        """
        segment_states: list[FlightState] = []

        if not profile.is_stationary:
            elapsed_time = 0.0
            current_speed = start.speed_meters_per_second
            current_altitude = start.altitude_meters

            while elapsed_time <= profile.flight_time_seconds:
                latitude, longitude = self._interpolate_position(
                    start, end, profile, elapsed_time / profile.flight_time_seconds
                )
                segment_states.append(
                    FlightState(
                        latitude_degrees=latitude,
                        longitude_degrees=longitude,
                        altitude_meters=current_altitude,
                        speed_meters_per_second=current_speed,
                        course_degrees=profile.course_degrees,
                    )
                )

                elapsed_time += self.time_step
                current_speed += profile.speed_change_per_step
                current_altitude += profile.altitude_change_per_step

        segment_states.append(FlightState.from_waypoint(end, profile.course_degrees))
        return segment_states

    def _interpolate_position(
        self,
        start: WayPoint,
        end: WayPoint,
        profile: SegmentProfile,
        fraction: float,
    ) -> tuple[float, float]:
        """Position at a fraction of the segment's flight time."""
        if self.configuration.interpolation_mode is InterpolationMode.GREAT_CIRCLE:
            return interpolate_great_circle_position(start, end, fraction, profile.central_angle_radians)
        return (
            interpolate_linearly(start.latitude_degrees, end.latitude_degrees, fraction),
            interpolate_linearly(start.longitude_degrees, end.longitude_degrees, fraction),
        )


class RouteCalculator:
    """Calculates sampled routes through ordered waypoints."""

    def __init__(self, configuration: RouteCalculationConfiguration | None = None) -> None:
        """Initialize the route calculator.

        Args:
            configuration: Optional route calculation options (defaults used if not provided).
        """
        self.configuration = configuration or RouteCalculationConfiguration()
        self.profile_calculator = SegmentProfileCalculator(self.configuration)
        self.integrator = SegmentStateIntegrator(self.configuration)

    def calculate_route(
        self,
        characteristics: AircraftCharacteristics,
        waypoints: Sequence[WayPoint],
    ) -> list[FlightState]:
        """Calculate the route through all waypoints.

        Segments are concatenated in waypoint order without removing the
        sample shared by the end of one segment and the start of the next.

        Args:
            characteristics: Aircraft performance envelope.
            waypoints: Ordered waypoints, at least two.

        Returns:
            Flight states for the whole route.

        Raises:
            InvalidWaypointSequenceError: If fewer than two waypoints are given.
            DegenerateSegmentError: If any segment is degenerate; no partial route is returned.
        """
        if len(waypoints) < 2:
            raise InvalidWaypointSequenceError(len(waypoints))

        logger.info("Calculating route through %d waypoints for %s", len(waypoints), characteristics)
        route: list[FlightState] = []

        for start, end in zip(waypoints[:-1], waypoints[1:]):
            route.extend(self.calculate_segment(start, end, characteristics))

        logger.info("Route calculated with %d flight states", len(route))
        return route

    def calculate_segment(
        self,
        start: WayPoint,
        end: WayPoint,
        characteristics: AircraftCharacteristics,
    ) -> list[FlightState]:
        """Calculate the flight states between two consecutive waypoints.

        Raises:
            DegenerateSegmentError: If the segment's flight time is unusable.
        """
        logger.debug("Calculating segment from %s to %s for %s", start, end, characteristics)
        profile = self.profile_calculator.calculate_profile(start, end, characteristics)
        logger.debug("Segment profile: %s", profile)
        return self.integrator.integrate_segment(start, end, profile)


def calculate_route(
    characteristics: AircraftCharacteristics,
    waypoints: Sequence[WayPoint],
    configuration: RouteCalculationConfiguration | None = None,
) -> list[FlightState]:
    """Calculate the route through all waypoints with a default calculator."""
    return RouteCalculator(configuration).calculate_route(characteristics, waypoints)


def calculate_segment(
    start: WayPoint,
    end: WayPoint,
    characteristics: AircraftCharacteristics,
    configuration: RouteCalculationConfiguration | None = None,
) -> list[FlightState]:
    """Calculate the flight states between two waypoints with a default calculator."""
    return RouteCalculator(configuration).calculate_segment(start, end, characteristics)
