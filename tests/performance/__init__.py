"""Performance tests for aircraft route calculation."""
