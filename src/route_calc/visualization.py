"""Route visualization for aircraft route calculation.

This module contains classes for charting computed routes: speed and
altitude against elapsed time, and the flight path in longitude/latitude.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt

from route_calc.constants import DEFAULT_OUTPUT_DIRECTORY
from route_calc.types import RouteResultData
from route_calc.utilities import generate_unique_filepath

if TYPE_CHECKING:
    from collections.abc import Sequence

    from matplotlib.figure import Figure

CHART_SIZE_INCHES: tuple[float, float] = (8.0, 6.0)


class RouteVisualizationRenderer:
    """Creates 2D charts of computed aircraft routes."""

    @staticmethod
    def render_speed_profile(
        route_results: Sequence[RouteResultData],
        plot_title: str = "Speed over Time",
        output_filepath: Path | str | None = None,
        output_directory: Path | None = None,
        output_filename_base: str | None = None,
    ) -> Path | None:
        """Chart speed against elapsed time for each route.

        Returns:
            Path to saved file if saving, None if displaying interactively.
        """
        figure, axes = plt.subplots(figsize=CHART_SIZE_INCHES)
        for route_index, route_result in enumerate(route_results):
            axes.plot(
                route_result["time_seconds"],
                route_result["speed_meters_per_second"],
                label=f"Route {route_index + 1}",
            )

        axes.set_xlabel("Time, s")
        axes.set_ylabel("Speed, m/s")
        axes.set_title(plot_title)
        axes.legend()

        return RouteVisualizationRenderer._save_or_show(
            figure, output_filepath, output_directory, output_filename_base, "speed"
        )

    @staticmethod
    def render_altitude_profile(
        route_results: Sequence[RouteResultData],
        plot_title: str = "Altitude over Time",
        output_filepath: Path | str | None = None,
        output_directory: Path | None = None,
        output_filename_base: str | None = None,
    ) -> Path | None:
        """Chart altitude against elapsed time for each route.

        Returns:
            Path to saved file if saving, None if displaying interactively.
        """
        figure, axes = plt.subplots(figsize=CHART_SIZE_INCHES)
        for route_index, route_result in enumerate(route_results):
            axes.plot(
                route_result["time_seconds"],
                route_result["altitude_meters"],
                label=f"Route {route_index + 1}",
            )

        axes.set_xlabel("Time, s")
        axes.set_ylabel("Altitude, m")
        axes.set_title(plot_title)
        axes.legend()

        return RouteVisualizationRenderer._save_or_show(
            figure, output_filepath, output_directory, output_filename_base, "altitude"
        )

    @staticmethod
    def render_flight_path(
        route_results: Sequence[RouteResultData],
        plot_title: str = "Flight Path",
        output_filepath: Path | str | None = None,
        output_directory: Path | None = None,
        output_filename_base: str | None = None,
    ) -> Path | None:
        """Chart latitude against longitude for each route.

        Args:
            route_results: Sequence of route result dictionaries.
            plot_title: Plot title.
            output_filepath: Explicit path to save the plot image. If None, uses output_directory.
            output_directory: Directory to save files in (uses DEFAULT_OUTPUT_DIRECTORY if None).
            output_filename_base: Base filename for auto-generated path (required if output_filepath is None
                and saving to file is desired).

        Returns:
            Path to saved file if saving, None if displaying interactively.
        """
        figure, axes = plt.subplots(figsize=CHART_SIZE_INCHES)
        for route_index, route_result in enumerate(route_results):
            axes.plot(
                route_result["longitude_degrees"],
                route_result["latitude_degrees"],
                label=f"Route {route_index + 1}",
            )

        axes.set_xlabel("Longitude")
        axes.set_ylabel("Latitude")
        axes.set_title(plot_title)
        axes.legend()

        return RouteVisualizationRenderer._save_or_show(
            figure, output_filepath, output_directory, output_filename_base, "path"
        )

    @staticmethod
    def _save_or_show(
        figure: Figure,
        output_filepath: Path | str | None,
        output_directory: Path | None,
        output_filename_base: str | None,
        chart_suffix: str,
    ) -> Path | None:
        """Save the figure if a destination is known, otherwise display it."""
        save_path: Path | None = None
        if output_filepath is not None:
            save_path = Path(output_filepath)
            save_path.parent.mkdir(parents=True, exist_ok=True)
        elif output_filename_base is not None:
            target_directory = output_directory or DEFAULT_OUTPUT_DIRECTORY
            save_path = generate_unique_filepath(target_directory, f"{output_filename_base}_{chart_suffix}", ".png")

        if save_path is not None:
            figure.savefig(save_path, dpi=150, bbox_inches="tight")
            plt.close(figure)
            return save_path

        plt.show()
        return None
