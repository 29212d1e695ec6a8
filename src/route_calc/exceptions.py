"""Exceptions raised by route calculation."""

from __future__ import annotations


class RouteCalculationError(ValueError):
    """Base class for errors raised while calculating a route."""


class InvalidWaypointSequenceError(RouteCalculationError):
    """Raised when a route is requested with fewer than two waypoints."""

    def __init__(self, number_of_waypoints: int) -> None:
        self.number_of_waypoints = number_of_waypoints
        super().__init__(f"at least two waypoints required, got {number_of_waypoints}")


class DegenerateSegmentError(RouteCalculationError):
    """Raised when a segment's flight time cannot bound the integration loop.

    This covers a non-positive or non-finite average speed between the two
    waypoints, and flight times that are negative, non-finite or above the
    configured maximum.
    """

    def __init__(self, message: str, flight_time_seconds: float) -> None:
        self.flight_time_seconds = flight_time_seconds
        super().__init__(message)
