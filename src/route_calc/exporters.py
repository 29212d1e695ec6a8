"""Route result exporters for aircraft route calculation.

This module contains classes for exporting route results
to various file formats (CSV, MATLAB).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd
import scipy.io

from route_calc.constants import DEFAULT_OUTPUT_DIRECTORY, FileExportLimits
from route_calc.types import RouteResultData, RouteResultExporterInterface
from route_calc.utilities import generate_unique_filepath

if TYPE_CHECKING:
    from collections.abc import Sequence

ROUTE_ID_COLUMN = "Route_ID"


def resolve_route_names(
    route_results: Sequence[RouteResultData],
    route_names: Sequence[str] | None,
) -> list[str]:
    """Pair every route result with a name, numbering routes from 1 when none are given.

    Raises:
        ValueError: If the number of names does not match the number of routes.
    """
    if route_names is None:
        return [str(route_number) for route_number in range(1, len(route_results) + 1)]

    resolved_names = list(route_names)
    if len(resolved_names) != len(route_results):
        raise ValueError(f"Got {len(resolved_names)} route names for {len(route_results)} routes")
    return resolved_names


class CsvRouteResultExporter(RouteResultExporterInterface):
    """Exports route results to CSV format with automatic file splitting."""

    def __init__(
        self,
        maximum_rows_per_file: int = FileExportLimits.MAXIMUM_CSV_ROWS_PER_FILE,
    ) -> None:
        """Initialize the CSV exporter.

        Args:
            maximum_rows_per_file: Maximum number of rows per output file.
        """
        self.maximum_rows_per_file = maximum_rows_per_file

    def export_routes(
        self,
        route_results: Sequence[RouteResultData],
        output_filename_base: str,
        output_directory: Path | None = None,
        route_names: Sequence[str] | None = None,
    ) -> list[Path]:
        """Export route samples as rows, one file per block of maximum_rows_per_file rows.

        Args:
            route_results: Sequence of route results to export.
            output_filename_base: Base filename for output.
            output_directory: Directory to save files in (uses DEFAULT_OUTPUT_DIRECTORY if None).
            route_names: Value of the Route_ID column for each route (1, 2, ... if None).

        Returns:
            List of paths to created files.
        """
        if not route_results:
            print("No route data to export.")
            return []

        target_directory = output_directory or DEFAULT_OUTPUT_DIRECTORY
        route_frame = self.build_route_frame(route_results, route_names)

        created_files: list[Path] = []
        # An empty route still gets a file with the header row
        for first_row in range(0, max(len(route_frame), 1), self.maximum_rows_per_file):
            output_filepath = generate_unique_filepath(target_directory, f"{output_filename_base}_Route", ".csv")
            print(f"Writing to {output_filepath}...")
            route_frame.iloc[first_row : first_row + self.maximum_rows_per_file].to_csv(output_filepath, index=False)
            created_files.append(output_filepath)

        print("Data successfully saved.")
        return created_files

    @staticmethod
    def build_route_frame(
        route_results: Sequence[RouteResultData],
        route_names: Sequence[str] | None = None,
    ) -> pd.DataFrame:
        """Stack route results into one table, led by a Route_ID column."""
        route_frames = []
        for route_name, route_result in zip(resolve_route_names(route_results, route_names), route_results):
            route_frame = pd.DataFrame(dict(route_result))
            route_frame.insert(0, ROUTE_ID_COLUMN, route_name)
            route_frames.append(route_frame)
        return pd.concat(route_frames, ignore_index=True)


class MatlabRouteResultExporter(RouteResultExporterInterface):
    """Exports route results to MATLAB .mat format."""

    def export_routes(
        self,
        route_results: Sequence[RouteResultData],
        output_filename_base: str,
        output_directory: Path | None = None,
        route_names: Sequence[str] | None = None,
    ) -> Path:
        """Export route results to MATLAB format.

        Args:
            route_results: Sequence of route results to export.
            output_filename_base: Base filename for output.
            output_directory: Directory to save files in (uses DEFAULT_OUTPUT_DIRECTORY if None).
            route_names: Name stored alongside each route (1, 2, ... if None).

        Returns:
            Path to created file.
        """
        target_directory = output_directory or DEFAULT_OUTPUT_DIRECTORY
        output_filepath = generate_unique_filepath(target_directory, f"{output_filename_base}_Route", ".mat")

        scipy.io.savemat(
            str(output_filepath),
            {
                "results": list(route_results),
                "route_names": resolve_route_names(route_results, route_names),
            },
        )
        print(f"Data successfully saved to {output_filepath}")
        return output_filepath
