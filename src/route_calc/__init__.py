"""Aircraft Route Calculator.

This package computes time-stepped kinematic routes for an aircraft flying
through an ordered sequence of geographic waypoints within its performance
envelope.
"""

# Core calculation
from .calculator import (
    RouteCalculator,
    SegmentProfileCalculator,
    SegmentStateIntegrator,
    calculate_route,
    calculate_segment,
)

# Core types and data classes
from .constants import DEFAULT_OUTPUT_DIRECTORY
from .data_classes import (
    AircraftCharacteristics,
    FlightState,
    RouteCalculationConfiguration,
    SegmentProfile,
    WayPoint,
)
from .exceptions import DegenerateSegmentError, InvalidWaypointSequenceError, RouteCalculationError

# Export functionality
from .exporters import CsvRouteResultExporter, MatlabRouteResultExporter

# Geodesy
from .geodesy import calculate_great_circle_distance, calculate_initial_bearing

# Series projection and validation
from .series import convert_route_to_dataframe, convert_route_to_result_data

# Session
from .session import (
    DEMO_AIRCRAFT_CHARACTERISTICS,
    RouteCalculationSession,
    calculate_aircraft_route,
    get_available_route_files,
    load_waypoints_from_file,
)
from .types import InterpolationMode, RouteResultData
from .validation import ConstraintBasedRouteValidator

# Visualization
from .visualization import RouteVisualizationRenderer

__all__ = [
    # Constants
    "DEFAULT_OUTPUT_DIRECTORY",
    "DEMO_AIRCRAFT_CHARACTERISTICS",
    # Core types
    "AircraftCharacteristics",
    "FlightState",
    "InterpolationMode",
    "RouteCalculationConfiguration",
    "RouteResultData",
    "SegmentProfile",
    "WayPoint",
    # Errors
    "DegenerateSegmentError",
    "InvalidWaypointSequenceError",
    "RouteCalculationError",
    # Main API
    "RouteCalculator",
    "SegmentProfileCalculator",
    "SegmentStateIntegrator",
    "calculate_route",
    "calculate_segment",
    "calculate_great_circle_distance",
    "calculate_initial_bearing",
    # Series and validation
    "ConstraintBasedRouteValidator",
    "convert_route_to_dataframe",
    "convert_route_to_result_data",
    # Session
    "RouteCalculationSession",
    "calculate_aircraft_route",
    "get_available_route_files",
    "load_waypoints_from_file",
    # Exporters
    "CsvRouteResultExporter",
    "MatlabRouteResultExporter",
    # Visualization
    "RouteVisualizationRenderer",
]
