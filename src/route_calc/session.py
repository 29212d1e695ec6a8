"""Route calculation session management.

This module contains waypoint file loading and the session object tying
aircraft characteristics, waypoints, the computed route, export and
visualization together.
"""

from __future__ import annotations

import time
from contextlib import nullcontext
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from route_calc.calculator import RouteCalculator
from route_calc.constants import WaypointFileColumns
from route_calc.data_classes import (
    AircraftCharacteristics,
    FlightState,
    RouteCalculationConfiguration,
    WayPoint,
)
from route_calc.exporters import CsvRouteResultExporter, MatlabRouteResultExporter
from route_calc.series import convert_route_to_result_data
from route_calc.validation import ConstraintBasedRouteValidator
from route_calc.visualization import RouteVisualizationRenderer

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from route_calc.types import RouteResultData

DEMO_AIRCRAFT_CHARACTERISTICS = AircraftCharacteristics(
    maximum_speed_meters_per_second=250.0,
    maximum_acceleration_meters_per_second_squared=10.0,
    altitude_change_rate_meters_per_second=20.0,
    course_change_rate_degrees_per_second=5.0,
)


def get_available_route_files() -> list[str]:
    """Return list of waypoint CSV files in the package data directory.

    Returns:
        List of .csv filenames.
    """
    data_directory = resources.files(__package__) / "data"
    return sorted(
        entry.name for entry in data_directory.iterdir() if entry.is_file() and entry.name.endswith(".csv")
    )


def convert_dataframe_to_waypoints(waypoint_frame: pd.DataFrame) -> list[WayPoint]:
    """Convert a waypoint table into WayPoint values, preserving row order.

    Raises:
        KeyError: If a required column is missing.
    """
    required_columns = WaypointFileColumns.required_columns()
    missing_columns = [column for column in required_columns if column not in waypoint_frame.columns]
    if missing_columns:
        raise KeyError(f"Missing waypoint columns: {missing_columns}")

    return [
        WayPoint(
            latitude_degrees=float(latitude),
            longitude_degrees=float(longitude),
            altitude_meters=float(altitude),
            speed_meters_per_second=float(speed),
        )
        for latitude, longitude, altitude, speed in waypoint_frame[required_columns].itertuples(index=False, name=None)
    ]


def load_waypoints_from_file(filepath: str | Path) -> list[WayPoint] | None:
    """Load ordered waypoints from a CSV file.

    Args:
        filepath: Path to the CSV file, or the name of a packaged route file.

    Returns:
        List of waypoints or None if loading fails.
    """
    filepath = Path(filepath)
    base_name = filepath.name

    try:
        data_context: AbstractContextManager[Path] = nullcontext(filepath)

        if not filepath.is_file():
            resource_path = resources.files(__package__) / "data" / base_name
            if not resource_path.is_file():
                print(f"The file {filepath} was not found in the current directory or in the package.")
                return None
            data_context = resources.as_file(resource_path)

        with data_context as resolved_path:
            waypoint_frame = pd.read_csv(resolved_path)

        return convert_dataframe_to_waypoints(waypoint_frame)

    except FileNotFoundError:
        print(f"The file {filepath} was not found.")
        return None
    except (OSError, ValueError, KeyError) as error:
        print(f"An error occurred while loading the file: {error}")
        return None


@dataclass
class RouteCalculationSession:
    """Encapsulates a route calculation session.

    This class maintains session state and provides a clean interface
    for the calculate, validate, export and visualize workflow.
    """

    characteristics: AircraftCharacteristics
    waypoints: list[WayPoint]
    route_name: str
    calculator: RouteCalculator = field(default_factory=RouteCalculator)
    route: list[FlightState] = field(default_factory=list)

    @classmethod
    def create_from_file(
        cls,
        filepath: str | Path,
        characteristics: AircraftCharacteristics = DEMO_AIRCRAFT_CHARACTERISTICS,
        configuration: RouteCalculationConfiguration | None = None,
    ) -> RouteCalculationSession | None:
        """Create a route calculation session from a waypoint file.

        Args:
            filepath: Path to the waypoint CSV file or a packaged file name.
            characteristics: Aircraft performance envelope.
            configuration: Optional route calculation options.

        Returns:
            RouteCalculationSession instance or None if loading fails.
        """
        waypoints = load_waypoints_from_file(filepath)
        if waypoints is None:
            return None

        return cls(
            characteristics=characteristics,
            waypoints=waypoints,
            route_name=Path(filepath).stem,
            calculator=RouteCalculator(configuration),
        )

    def calculate_route(self) -> list[FlightState]:
        """Calculate the route and store it in the session.

        Raises:
            InvalidWaypointSequenceError: If the session holds fewer than two waypoints.
            DegenerateSegmentError: If any segment is degenerate.
        """
        self.route = self.calculator.calculate_route(self.characteristics, self.waypoints)
        return self.route

    @property
    def route_result(self) -> RouteResultData:
        """Get the stored route as time series."""
        return convert_route_to_result_data(self.route)

    def validate_route(self) -> bool:
        """Check the stored route against the aircraft performance envelope."""
        validator = ConstraintBasedRouteValidator(self.characteristics)
        is_valid = validator.validate_route(self.route_result)
        if not is_valid:
            print(f"Route {self.route_name} exceeds the aircraft performance envelope.")
        return is_valid

    def export_to_csv(
        self,
        output_filename_base: str | None = None,
        output_directory: Path | None = None,
    ) -> list[Path]:
        """Export the stored route to CSV format.

        Args:
            output_filename_base: Base filename (uses route name if not provided).
            output_directory: Directory to save files in.

        Returns:
            List of created file paths.
        """
        if not self.route:
            print("No route to export.")
            return []

        filename_base = output_filename_base or self.route_name
        exporter = CsvRouteResultExporter()
        return exporter.export_routes(
            [self.route_result], filename_base, output_directory, route_names=[self.route_name]
        )

    def export_to_matlab(
        self,
        output_filename_base: str | None = None,
        output_directory: Path | None = None,
    ) -> Path | None:
        """Export the stored route to MATLAB format.

        Args:
            output_filename_base: Base filename (uses route name if not provided).
            output_directory: Directory to save files in.

        Returns:
            Path to created file or None if no route.
        """
        if not self.route:
            print("No route to export.")
            return None

        filename_base = output_filename_base or self.route_name
        exporter = MatlabRouteResultExporter()
        return exporter.export_routes(
            [self.route_result], filename_base, output_directory, route_names=[self.route_name]
        )

    def visualize_route(
        self,
        output_directory: Path | None = None,
        save_to_file: bool = True,
    ) -> list[Path]:
        """Chart speed, altitude and flight path of the stored route.

        Args:
            output_directory: Directory to save charts in.
            save_to_file: If True, saves each chart with a unique filename.
                If False, displays them interactively.

        Returns:
            Paths of saved charts, empty when displaying interactively.
        """
        route_results = [self.route_result]
        filename_base = self.route_name if save_to_file else None
        title_prefix = self.route_name.replace("_", " ")

        saved_paths = [
            RouteVisualizationRenderer.render_speed_profile(
                route_results,
                f"{title_prefix}: Speed over Time",
                output_directory=output_directory,
                output_filename_base=filename_base,
            ),
            RouteVisualizationRenderer.render_altitude_profile(
                route_results,
                f"{title_prefix}: Altitude over Time",
                output_directory=output_directory,
                output_filename_base=filename_base,
            ),
            RouteVisualizationRenderer.render_flight_path(
                route_results,
                f"{title_prefix}: Flight Path",
                output_directory=output_directory,
                output_filename_base=filename_base,
            ),
        ]
        return [path for path in saved_paths if path is not None]


def calculate_aircraft_route(
    route_filepath: str | Path,
    characteristics: AircraftCharacteristics = DEMO_AIRCRAFT_CHARACTERISTICS,
    configuration: RouteCalculationConfiguration | None = None,
) -> tuple[list[FlightState], RouteCalculationSession] | None:
    """Calculate an aircraft route from a waypoint file.

    This is the main entry point for route calculation from files.

    Args:
        route_filepath: Path to waypoint CSV file or packaged file name.
        characteristics: Aircraft performance envelope.
        configuration: Optional route calculation options.

    Returns:
        Tuple of (route, session) or None if waypoint loading fails.
    """
    start_time = time.time()

    session = RouteCalculationSession.create_from_file(route_filepath, characteristics, configuration)
    if session is None:
        return None

    route = session.calculate_route()

    elapsed_time = time.time() - start_time
    print(f"Total time taken: {elapsed_time:.2f} seconds")

    return route, session
