"""Utility functions for aircraft route calculation.

This module contains utility functions for interpolation and file operations.
"""

from __future__ import annotations

from pathlib import Path


def generate_unique_filepath(output_directory: Path, base_name: str, extension: str) -> Path:
    """Generate a unique filepath by appending a number if file exists.

    Args:
        output_directory: Directory to save the file in.
        base_name: Base filename without extension.
        extension: File extension including the dot (e.g., '.csv').

    Returns:
        Unique filepath that does not exist.
    """
    output_directory.mkdir(parents=True, exist_ok=True)
    counter = 0
    filepath = output_directory / f"{base_name}{extension}"

    while filepath.exists():
        counter += 1
        filepath = output_directory / f"{base_name}_{counter}{extension}"

    return filepath


def interpolate_linearly(start_value: float, end_value: float, fraction: float) -> float:
    """Interpolate between two values.

    Args:
        start_value: Value at fraction 0.
        end_value: Value at fraction 1.
        fraction: Position between the two values; not clamped.

    Returns:
        start_value + (end_value - start_value) * fraction.
    """
    return start_value + (end_value - start_value) * fraction
