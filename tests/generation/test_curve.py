"""Tests for the height curve remap."""

import numpy as np
import pytest

from voxelworld.generation.config import HeightCurveConfig
from voxelworld.generation.curve import HeightCurve


class TestHeightCurve:
    """Tests for HeightCurve."""

    def test_passes_through_control_points(self) -> None:
        curve = HeightCurve(HeightCurveConfig())
        np.testing.assert_allclose(curve([0.0, 0.5, 1.0]), [0.0, 0.2, 1.0])

    def test_default_curve_flattens_lowlands(self) -> None:
        curve = HeightCurve(HeightCurveConfig())
        assert curve(0.4) < 0.4

    def test_monotone_without_overshoot(self) -> None:
        """Monotone control points give a monotone curve within [0, 1]."""
        curve = HeightCurve(HeightCurveConfig())
        values = curve(np.linspace(0.0, 1.0, 500))
        assert np.all(np.diff(values) >= -1e-12)
        assert values.min() >= -1e-12
        assert values.max() <= 1.0 + 1e-12

    def test_inputs_clamped_to_curve_range(self) -> None:
        curve = HeightCurve(HeightCurveConfig())
        np.testing.assert_allclose(curve([-1.0, 2.0]), [0.0, 1.0])

    def test_two_points_is_linear(self) -> None:
        curve = HeightCurve(HeightCurveConfig(points=((0.0, 0.0), (1.0, 1.0))))
        assert float(curve(0.25)) == pytest.approx(0.25)
        assert float(curve(0.8)) == pytest.approx(0.8)

    def test_pure_function(self) -> None:
        curve = HeightCurve(HeightCurveConfig())
        heights = np.random.default_rng(0).random((8, 8))
        np.testing.assert_array_equal(curve(heights), curve(heights))

    def test_shape_preserved(self) -> None:
        curve = HeightCurve(HeightCurveConfig())
        assert curve(np.zeros((4, 6))).shape == (4, 6)
