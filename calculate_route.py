"""Demo script for aircraft route calculation.

This script calculates the packaged demo route, checks it against the
aircraft performance envelope, and saves exports and charts.

All output files are automatically saved to the 'output' directory
with unique filenames to prevent overwriting.
"""

import logging

from route_calc import (
    DEMO_AIRCRAFT_CHARACTERISTICS,
    RouteCalculationSession,
    get_available_route_files,
)
from route_calc.constants import DEMO_ROUTE_FILENAME


def main() -> None:
    """Calculate the demo route using the session-based API."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(name)s | %(message)s")

    available_routes = get_available_route_files()
    print(f"Available route files: {available_routes}")

    session = RouteCalculationSession.create_from_file(DEMO_ROUTE_FILENAME, DEMO_AIRCRAFT_CHARACTERISTICS)

    if session is None:
        print(f"Failed to load route file: {DEMO_ROUTE_FILENAME}")
        return

    print(f"Loaded route: {session.route_name} with {len(session.waypoints)} waypoints")

    route = session.calculate_route()
    print(f"Calculated {len(route)} flight states")

    if session.validate_route():
        print("Route is within the aircraft performance envelope")

    matlab_output_path = session.export_to_matlab()
    if matlab_output_path:
        print(f"Saved MATLAB file: {matlab_output_path}")

    csv_output_paths = session.export_to_csv()
    if csv_output_paths:
        print(f"Saved CSV file(s): {csv_output_paths}")

    saved_paths = session.visualize_route()
    if saved_paths:
        print(f"Saved plot images: {saved_paths}")


if __name__ == "__main__":
    main()
