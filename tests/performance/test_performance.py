"""Pytest-based performance tests for route calculation.

These tests can be run with pytest to validate performance characteristics
and detect performance regressions.

Run with:
    pytest tests/performance/test_performance.py -v -s
"""

from __future__ import annotations

import statistics
import time

import numpy as np
import pytest

from route_calc import (
    DEMO_AIRCRAFT_CHARACTERISTICS,
    RouteCalculator,
    WayPoint,
    convert_route_to_result_data,
)
from route_calc.calculator import SegmentProfileCalculator, SegmentStateIntegrator
from route_calc.data_classes import RouteCalculationConfiguration

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(scope="module")
def route_calculator() -> RouteCalculator:
    """Create a route calculator for testing."""
    return RouteCalculator()


@pytest.fixture(scope="module")
def zigzag_waypoints() -> list[WayPoint]:
    """Create a long zigzag route with varying altitude and speed."""
    return [
        WayPoint(
            latitude_degrees=0.05 * index,
            longitude_degrees=0.02 * (index % 2),
            altitude_meters=1000.0 + 50.0 * (index % 3),
            speed_meters_per_second=120.0 + 10.0 * (index % 4),
        )
        for index in range(50)
    ]


# =============================================================================
# Performance Tests
# =============================================================================


class TestRouteCalculationPerformance:
    """Performance tests for route calculation."""

    @pytest.mark.parametrize(
        ("segment_length_degrees", "max_time_seconds"),
        [
            (0.1, 1.0),  # Short segment
            (1.0, 2.0),  # Around a thousand samples
            (5.0, 5.0),  # Several thousand samples
        ],
    )
    def test_single_segment_time(
        self,
        route_calculator: RouteCalculator,
        segment_length_degrees: float,
        max_time_seconds: float,
    ) -> None:
        """Test that a single long segment completes within expected time."""
        start = WayPoint(0.0, 0.0, 1000.0, 100.0)
        end = WayPoint(segment_length_degrees, 0.0, 3000.0, 100.0)

        start_time = time.perf_counter()
        segment = route_calculator.calculate_segment(start, end, DEMO_AIRCRAFT_CHARACTERISTICS)
        elapsed_time = time.perf_counter() - start_time

        assert len(segment) > 0
        assert elapsed_time < max_time_seconds, f"Segment calculation took {elapsed_time:.2f}s, expected < {max_time_seconds}s"

        samples_per_second = len(segment) / elapsed_time
        print(f"\nCalculated {len(segment)} samples in {elapsed_time:.4f}s ({samples_per_second:.0f} samples/s)")

    def test_component_timing_breakdown(self) -> None:
        """Test performance of the profile and integration stages."""
        configuration = RouteCalculationConfiguration()
        profile_calculator = SegmentProfileCalculator(configuration)
        integrator = SegmentStateIntegrator(configuration)
        start = WayPoint(0.0, 0.0, 1000.0, 100.0)
        end = WayPoint(1.0, 1.0, 2000.0, 150.0)

        timings: dict[str, float] = {}

        begin = time.perf_counter()
        profile = profile_calculator.calculate_profile(start, end, DEMO_AIRCRAFT_CHARACTERISTICS)
        timings["profile"] = time.perf_counter() - begin

        begin = time.perf_counter()
        segment = integrator.integrate_segment(start, end, profile)
        timings["integration"] = time.perf_counter() - begin

        begin = time.perf_counter()
        route_result = convert_route_to_result_data(segment)
        timings["series_projection"] = time.perf_counter() - begin

        total = sum(timings.values())
        print("\nSegment calculation timing breakdown:")
        print("-" * 50)
        for name, duration in timings.items():
            percentage = (duration / total) * 100 if total > 0 else 0.0
            print(f"  {name:.<30} {duration * 1000:>8.2f}ms ({percentage:>5.1f}%)")
        print("-" * 50)
        print(f"  {'Total':.<30} {total * 1000:>8.2f}ms")

        assert len(route_result["time_seconds"]) == len(segment)

    def test_throughput_benchmark(
        self,
        route_calculator: RouteCalculator,
        zigzag_waypoints: list[WayPoint],
    ) -> None:
        """Benchmark multi-segment route throughput."""
        # Warmup
        route_calculator.calculate_route(DEMO_AIRCRAFT_CHARACTERISTICS, zigzag_waypoints[:5])

        iterations = 3
        times: list[float] = []
        number_of_samples = 0
        for _ in range(iterations):
            start = time.perf_counter()
            route = route_calculator.calculate_route(DEMO_AIRCRAFT_CHARACTERISTICS, zigzag_waypoints)
            times.append(time.perf_counter() - start)
            number_of_samples = len(route)

        mean_time = statistics.mean(times)
        std_time = statistics.stdev(times) if len(times) > 1 else 0

        print("\nThroughput benchmark results:")
        print(f"  Mean time: {mean_time:.4f}s ± {std_time:.4f}s")
        print(f"  Samples per route: {number_of_samples}")
        print(f"  Time per segment: {mean_time / (len(zigzag_waypoints) - 1) * 1000:.2f}ms")

        assert number_of_samples > len(zigzag_waypoints)


# =============================================================================
# Regression Tests
# =============================================================================


class TestPerformanceRegression:
    """Tests to detect performance regressions."""

    # These thresholds should be updated based on baseline measurements
    LONG_ROUTE_MAX_TIME_SECONDS = 5.0

    def test_long_route_regression(
        self,
        route_calculator: RouteCalculator,
        zigzag_waypoints: list[WayPoint],
    ) -> None:
        """Ensure long route calculation doesn't regress."""
        start = time.perf_counter()
        route = route_calculator.calculate_route(DEMO_AIRCRAFT_CHARACTERISTICS, zigzag_waypoints)
        elapsed = time.perf_counter() - start

        times = convert_route_to_result_data(route)["time_seconds"]
        assert np.all(np.diff(times) == 1.0)
        assert elapsed < self.LONG_ROUTE_MAX_TIME_SECONDS, (
            f"Long route calculation took {elapsed:.2f}s, threshold is {self.LONG_ROUTE_MAX_TIME_SECONDS}s"
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
