"""Continuous per-cell fields: fractal height and moisture."""

import numpy as np
import structlog
from numpy.typing import ArrayLike, NDArray

from .config import NoiseConfig
from .noise import PerlinNoise

logger = structlog.get_logger()

# Moisture samples the height source shifted by this many noise units
MOISTURE_CHANNEL_OFFSET = 500.0


def effective_octaves(octaves: int) -> int:
    """Octave count actually used; anything below 1 runs a single octave."""
    if octaves < 1:
        logger.warning("octaves_clamped", requested=octaves, used=1)
        return 1
    return octaves


def fractal_noise(
    noise: PerlinNoise,
    xs: ArrayLike,
    zs: ArrayLike,
    config: NoiseConfig,
    octave_offsets: NDArray[np.float64],
    channel_offset: float = 0.0,
) -> NDArray[np.float64]:
    """Sum octaves of noise at cell coordinates, normalized to [0, 1].

    Octave i is sampled at frequency lacunarity**i with amplitude
    persistence**i, shifted by its precomputed offset. Dividing by the total
    amplitude keeps the result in [0, 1] for any octave count or
    persistence; the first octave always contributes amplitude 1.

    Args:
        noise: Coherent noise source.
        xs: Cell x coordinates.
        zs: Cell z coordinates (broadcast against xs).
        config: Noise parameters.
        octave_offsets: Array of shape (octaves, 2) from derive_octave_offsets.
        channel_offset: Constant shift selecting an independent channel.

    Returns:
        Array of fractal values in [0, 1].
    """
    xs = np.asarray(xs, dtype=np.float64)
    zs = np.asarray(zs, dtype=np.float64)

    base_x = xs / config.scale + config.offset_x + channel_offset
    base_z = zs / config.scale + config.offset_z + channel_offset

    total = np.zeros(np.broadcast(base_x, base_z).shape, dtype=np.float64)
    amplitude = 1.0
    frequency = 1.0
    max_possible = 0.0

    for offset_x, offset_z in octave_offsets:
        sample_x = base_x * frequency + offset_x
        sample_z = base_z * frequency + offset_z
        total += noise.sample(sample_x, sample_z) * amplitude
        max_possible += amplitude
        amplitude *= config.persistence
        frequency *= config.lacunarity

    # Guards float drift only
    return np.clip(total / max_possible, 0.0, 1.0)


def _cell_grid(width: int, depth: int) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    zs, xs = np.meshgrid(np.arange(depth), np.arange(width), indexing="ij")
    return xs, zs


def make_height_field(
    width: int,
    depth: int,
    noise: PerlinNoise,
    config: NoiseConfig,
    octave_offsets: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Raw fractal height for every cell, shape (depth, width)."""
    xs, zs = _cell_grid(width, depth)
    return fractal_noise(noise, xs, zs, config, octave_offsets)


def make_moisture_field(
    width: int,
    depth: int,
    noise: PerlinNoise,
    config: NoiseConfig,
    octave_offsets: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Moisture for every cell, sampled on the offset noise channel."""
    xs, zs = _cell_grid(width, depth)
    return fractal_noise(
        noise,
        xs,
        zs,
        config,
        octave_offsets,
        channel_offset=MOISTURE_CHANNEL_OFFSET,
    )
