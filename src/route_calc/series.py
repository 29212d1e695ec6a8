"""Projection of computed routes into numeric time series.

The sample index of a route doubles as its elapsed time in seconds, one
sample per second.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from route_calc.types import RouteResultData

if TYPE_CHECKING:
    from collections.abc import Sequence

    from route_calc.data_classes import FlightState

ROUTE_RESULT_KEYS: tuple[str, ...] = (
    "time_seconds",
    "latitude_degrees",
    "longitude_degrees",
    "altitude_meters",
    "speed_meters_per_second",
    "course_degrees",
)


def convert_route_to_result_data(route: Sequence[FlightState]) -> RouteResultData:
    """Convert a route into a dictionary of equally long numpy arrays.

    Args:
        route: Flight states in emission order.

    Returns:
        RouteResultData with one entry per flight state.
    """
    state_history_buffer = np.full((len(route), len(ROUTE_RESULT_KEYS)), np.nan)
    for sample_index, flight_state in enumerate(route):
        state_history_buffer[sample_index, :] = flight_state.to_output_array(float(sample_index))

    return {
        "time_seconds": state_history_buffer[:, 0],
        "latitude_degrees": state_history_buffer[:, 1],
        "longitude_degrees": state_history_buffer[:, 2],
        "altitude_meters": state_history_buffer[:, 3],
        "speed_meters_per_second": state_history_buffer[:, 4],
        "course_degrees": state_history_buffer[:, 5],
    }


def convert_route_to_dataframe(route: Sequence[FlightState]) -> pd.DataFrame:
    """Convert a route into a DataFrame indexed by sample number."""
    route_result = convert_route_to_result_data(route)
    return pd.DataFrame({key: route_result[key] for key in ROUTE_RESULT_KEYS})  # type: ignore[literal-required]
