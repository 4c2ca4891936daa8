"""Tests for the single-anchor fallback bend."""

import math
import pytest

from perpendicular_snap.core.geometry import estimate_fallback_path


class TestEstimateFallbackPath:
    """Tests for estimate_fallback_path."""

    @pytest.mark.parametrize("current, corner", [
        ((1.0, -1.0), (0.0, -1.0)),   # x greater, y smaller
        ((1.0, 1.0), (1.0, 0.0)),     # x greater, y greater
        ((-1.0, 1.0), (0.0, 1.0)),    # x smaller, y greater
        ((-1.0, -1.0), (-1.0, 0.0)),  # x smaller, y smaller
    ])
    def test_quadrant_corners(self, current, corner):
        path = estimate_fallback_path((0.0, 0.0), current)
        assert path == ((0.0, 0.0), corner)

    def test_corner_makes_right_angle(self):
        """One leg is vertical from the anchor, the other horizontal to the cursor."""
        last = (100.0, 200.0)
        current = (340.0, 50.0)
        start, corner = estimate_fallback_path(last, current)
        assert start == last
        assert corner[0] == last[0]
        assert corner[1] == current[1]

    @pytest.mark.parametrize("current", [
        (0.0, 5.0),
        (5.0, 0.0),
        (0.0, 0.0),
    ])
    def test_axis_aligned_cursor_is_not_bent(self, current):
        assert estimate_fallback_path((0.0, 0.0), current) == ((0.0, 0.0), current)

    def test_returns_tuples_for_list_input(self):
        path = estimate_fallback_path([1, 2], [3, 4])
        assert path == ((1.0, 2.0), (3.0, 2.0))
        assert all(isinstance(p, tuple) for p in path)

    def test_does_not_mutate_inputs(self):
        last = [0.0, 0.0]
        current = [2.0, 3.0]
        estimate_fallback_path(last, current)
        assert last == [0.0, 0.0]
        assert current == [2.0, 3.0]

    def test_nan_passes_through(self):
        start, end = estimate_fallback_path((0.0, 0.0), (math.nan, 1.0))
        assert start == (0.0, 0.0)
        assert math.isnan(end[0])
        assert end[1] == 1.0

    def test_infinity_bends(self):
        path = estimate_fallback_path((0.0, 0.0), (math.inf, math.inf))
        assert path == ((0.0, 0.0), (math.inf, 0.0))
