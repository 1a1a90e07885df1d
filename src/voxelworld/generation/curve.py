"""Height curve remapping of the normalized fractal height."""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.interpolate import PchipInterpolator

from .config import HeightCurveConfig


class HeightCurve:
    """Piecewise monotone cubic through the configured control points.

    PCHIP keeps each segment between its endpoints, so a monotone set of
    control points yields a monotone curve with no overshoot. Inputs outside
    the first/last control point are clamped to them.
    """

    def __init__(self, config: HeightCurveConfig):
        points = np.asarray(config.points, dtype=np.float64)
        self._x_min = float(points[0, 0])
        self._x_max = float(points[-1, 0])
        self._interpolator = PchipInterpolator(points[:, 0], points[:, 1])

    def evaluate(self, heights: ArrayLike) -> NDArray[np.float64]:
        """Remap heights through the curve."""
        clamped = np.clip(np.asarray(heights, dtype=np.float64), self._x_min, self._x_max)
        return np.asarray(self._interpolator(clamped), dtype=np.float64)

    __call__ = evaluate
