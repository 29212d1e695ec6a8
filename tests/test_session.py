"""Tests for waypoint file loading and the route calculation session."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from route_calc import (
    DEMO_AIRCRAFT_CHARACTERISTICS,
    DegenerateSegmentError,
    RouteCalculationSession,
    WayPoint,
    calculate_aircraft_route,
    get_available_route_files,
    load_waypoints_from_file,
)
from route_calc.constants import DEMO_ROUTE_FILENAME
from route_calc.session import convert_dataframe_to_waypoints

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def climbing_route_file(tmp_path: Path) -> Path:
    """Write a short climbing route to a CSV file."""
    filepath = tmp_path / "climbing_route.csv"
    pd.DataFrame(
        {
            "latitude_degrees": [0.0, 0.01, 0.02],
            "longitude_degrees": [0.0, 0.0, 0.01],
            "altitude_meters": [500.0, 520.0, 540.0],
            "speed_meters_per_second": [100.0, 120.0, 110.0],
        }
    ).to_csv(filepath, index=False)
    return filepath


# =============================================================================
# Waypoint Loading Tests
# =============================================================================


class TestWaypointLoading:
    """Tests for waypoint file loading."""

    def test_available_route_files(self, package_data_directory: Path) -> None:
        """Test that every packaged route file is listed."""
        available_routes = get_available_route_files()

        assert DEMO_ROUTE_FILENAME in available_routes
        assert available_routes == sorted(path.name for path in package_data_directory.glob("*.csv"))

    def test_load_packaged_route(self) -> None:
        """Test loading the packaged demo route by name."""
        waypoints = load_waypoints_from_file(DEMO_ROUTE_FILENAME)

        assert waypoints is not None
        assert len(waypoints) == 6
        assert waypoints[0] == WayPoint(0.0, 0.0, 0.0, 0.0)
        assert waypoints[-1] == WayPoint(0.1, 0.0, 0.0, 0.0)

    def test_load_local_route(self, climbing_route_file: Path) -> None:
        """Test loading a route file from a local path."""
        waypoints = load_waypoints_from_file(climbing_route_file)

        assert waypoints == [
            WayPoint(0.0, 0.0, 500.0, 100.0),
            WayPoint(0.01, 0.0, 520.0, 120.0),
            WayPoint(0.02, 0.01, 540.0, 110.0),
        ]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file returns None."""
        assert load_waypoints_from_file(tmp_path / "no_such_route.csv") is None

    def test_missing_columns(self, tmp_path: Path) -> None:
        """Test that a file without the waypoint columns returns None."""
        filepath = tmp_path / "bad_route.csv"
        pd.DataFrame({"latitude_degrees": [0.0], "longitude_degrees": [0.0]}).to_csv(filepath, index=False)

        assert load_waypoints_from_file(filepath) is None

    def test_convert_dataframe_missing_columns(self) -> None:
        """Test that conversion names the missing columns."""
        with pytest.raises(KeyError, match="speed_meters_per_second"):
            convert_dataframe_to_waypoints(
                pd.DataFrame({"latitude_degrees": [0.0], "longitude_degrees": [0.0], "altitude_meters": [0.0]})
            )


# =============================================================================
# Session Tests
# =============================================================================


@pytest.mark.integration
class TestRouteCalculationSession:
    """Tests for RouteCalculationSession class."""

    def test_create_from_file(self, climbing_route_file: Path) -> None:
        """Test session creation from a route file."""
        session = RouteCalculationSession.create_from_file(climbing_route_file)

        assert session is not None
        assert session.route_name == "climbing_route"
        assert session.characteristics == DEMO_AIRCRAFT_CHARACTERISTICS
        assert len(session.waypoints) == 3
        assert session.route == []

    def test_create_from_missing_file(self, tmp_path: Path) -> None:
        """Test that session creation fails gracefully for a missing file."""
        assert RouteCalculationSession.create_from_file(tmp_path / "missing.csv") is None

    def test_full_workflow(self, climbing_route_file: Path, tmp_path: Path) -> None:
        """Test calculate, validate, export and visualize on one session."""
        session = RouteCalculationSession.create_from_file(climbing_route_file)
        assert session is not None

        route = session.calculate_route()

        assert len(route) > 0
        assert session.route is route
        assert session.validate_route() is True

        csv_paths = session.export_to_csv(output_directory=tmp_path)
        assert len(csv_paths) == 1
        exported = pd.read_csv(csv_paths[0])
        assert len(exported) == len(route)
        assert set(exported["Route_ID"]) == {"climbing_route"}

        matlab_path = session.export_to_matlab(output_directory=tmp_path)
        assert matlab_path is not None
        assert matlab_path.exists()

        chart_paths = session.visualize_route(output_directory=tmp_path)
        assert len(chart_paths) == 3
        assert all(path.exists() for path in chart_paths)

    def test_export_without_route(self, climbing_route_file: Path, tmp_path: Path) -> None:
        """Test that exporting before calculating produces no files."""
        session = RouteCalculationSession.create_from_file(climbing_route_file)
        assert session is not None

        assert session.export_to_csv(output_directory=tmp_path) == []
        assert session.export_to_matlab(output_directory=tmp_path) is None

    def test_degenerate_route_raises(self, tmp_path: Path) -> None:
        """Test that a route flown at zero speed raises during calculation."""
        filepath = tmp_path / "stalled_route.csv"
        pd.DataFrame(
            {
                "latitude_degrees": [0.0, 0.1],
                "longitude_degrees": [0.0, 0.0],
                "altitude_meters": [0.0, 0.0],
                "speed_meters_per_second": [0.0, 0.0],
            }
        ).to_csv(filepath, index=False)
        session = RouteCalculationSession.create_from_file(filepath)
        assert session is not None

        with pytest.raises(DegenerateSegmentError):
            session.calculate_route()


@pytest.mark.integration
class TestCalculateAircraftRoute:
    """Tests for the calculate_aircraft_route entry point."""

    def test_packaged_demo_route(self) -> None:
        """Test calculating the packaged demo route."""
        result = calculate_aircraft_route(DEMO_ROUTE_FILENAME)

        assert result is not None
        route, session = result
        assert route is session.route
        assert route[0].speed_meters_per_second == 0.0
        assert route[-1].latitude_degrees == 0.1
        assert route[-1].altitude_meters == 0.0

    def test_missing_route_file(self, tmp_path: Path) -> None:
        """Test that a missing route file returns None."""
        assert calculate_aircraft_route(tmp_path / "missing.csv") is None
