"""Coherent 2D gradient noise.

Classic Perlin noise over a seeded permutation table, vectorized with numpy
so whole grids of sample coordinates are evaluated at once.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Unit-cell corner gradients, indexed by hash & 7
_GRADIENTS = np.array(
    [
        (1.0, 1.0),
        (-1.0, 1.0),
        (1.0, -1.0),
        (-1.0, -1.0),
        (1.0, 0.0),
        (-1.0, 0.0),
        (0.0, 1.0),
        (0.0, -1.0),
    ],
    dtype=np.float64,
)


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Quintic ease curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(
    a: NDArray[np.float64], b: NDArray[np.float64], t: NDArray[np.float64]
) -> NDArray[np.float64]:
    return a + t * (b - a)


def _grad(
    hashes: NDArray[np.int64], dx: NDArray[np.float64], dy: NDArray[np.float64]
) -> NDArray[np.float64]:
    g = _GRADIENTS[hashes & 7]
    return g[..., 0] * dx + g[..., 1] * dy


class PerlinNoise:
    """Seeded 2D Perlin noise sampler returning values in [0, 1].

    The permutation table is drawn from the given generator, so a restarted
    NOISE stream reproduces the same samples.
    """

    def __init__(self, rng: np.random.Generator):
        p = rng.permutation(256)
        # Doubled to avoid index wrapping
        self._perm = np.concatenate([p, p]).astype(np.int64)

    def sample(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64] | float:
        """Sample noise at real coordinates.

        Args:
            x: Scalar or array of x coordinates.
            y: Scalar or array of y coordinates (broadcast against x).

        Returns:
            Noise in [0, 1], a float for scalar input or an array otherwise.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        x_floor = np.floor(x)
        y_floor = np.floor(y)
        xf = x - x_floor
        yf = y - y_floor
        xi = x_floor.astype(np.int64) & 255
        yi = y_floor.astype(np.int64) & 255

        u = _fade(xf)
        v = _fade(yf)

        perm = self._perm
        a = perm[xi] + yi
        b = perm[xi + 1] + yi

        bottom = _lerp(_grad(perm[a], xf, yf), _grad(perm[b], xf - 1.0, yf), u)
        top = _lerp(
            _grad(perm[a + 1], xf, yf - 1.0),
            _grad(perm[b + 1], xf - 1.0, yf - 1.0),
            u,
        )
        n = _lerp(bottom, top, v)

        result = np.clip((n + 1.0) * 0.5, 0.0, 1.0)
        if result.ndim == 0:
            return float(result)
        return result
