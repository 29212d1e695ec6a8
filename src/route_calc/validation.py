"""Route validation for aircraft route calculation.

This module contains classes for checking computed routes against the
aircraft performance envelope. Validation is advisory: the calculator
does not enforce these limits while integrating.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import NDArray

from route_calc.geodesy import calculate_great_circle_distances
from route_calc.types import RouteResultData, RouteValidatorInterface

if TYPE_CHECKING:
    from route_calc.data_classes import AircraftCharacteristics
    from route_calc.types import GeographicPosition


class ConstraintBasedRouteValidator(RouteValidatorInterface):
    """Validates computed routes against aircraft performance limits."""

    def __init__(
        self,
        characteristics: AircraftCharacteristics,
        tolerance: float = 1e-6,
    ) -> None:
        """Initialize the validator.

        Args:
            characteristics: Aircraft performance envelope to validate against.
            tolerance: Allowance for floating point error on each limit.
        """
        self.characteristics = characteristics
        self.tolerance = tolerance

    def validate_route(self, route_result: RouteResultData) -> bool:
        """Check if a route satisfies all performance constraints.

        Args:
            route_result: Route result to validate.

        Returns:
            True if route is valid, False otherwise.
        """
        has_speed_violation = self._check_speed_constraint_violation(route_result)
        has_vertical_rate_violation = self._check_vertical_rate_constraint_violation(route_result)

        return not (has_speed_violation or has_vertical_rate_violation)

    def _check_speed_constraint_violation(self, route_result: RouteResultData) -> bool:
        """Check for negative speeds or speeds above the maximum."""
        speeds = route_result["speed_meters_per_second"]
        return bool(
            np.any(
                (speeds < -self.tolerance)
                | (speeds > self.characteristics.maximum_speed_meters_per_second + self.tolerance)
            )
        )

    def _check_vertical_rate_constraint_violation(self, route_result: RouteResultData) -> bool:
        """Check for climb or descent faster than the altitude change rate."""
        altitudes = route_result["altitude_meters"]
        times = route_result["time_seconds"]
        if altitudes.size < 2:
            return False

        vertical_rate_magnitude = np.abs(np.gradient(altitudes, times))
        return bool(
            np.any(
                vertical_rate_magnitude > self.characteristics.altitude_change_rate_meters_per_second + self.tolerance
            )
        )


def calculate_progress_toward(
    route_result: RouteResultData,
    destination: GeographicPosition,
) -> NDArray[np.floating[Any]]:
    """Calculate the remaining great-circle distance to a destination for every sample.

    Args:
        route_result: Route result to measure.
        destination: Position the route is heading to.

    Returns:
        Array of remaining distances in meters, one per sample.
    """
    return calculate_great_circle_distances(
        route_result["latitude_degrees"],
        route_result["longitude_degrees"],
        destination.latitude_degrees,
        destination.longitude_degrees,
    )
