"""Deterministic random streams derived from a single seed.

Every random decision in a run comes from one of these streams. Each stream
is seeded independently (``seed + stream``), so tuning one subsystem, e.g.
the city size, never shifts the draws another subsystem sees.
"""

from enum import IntEnum

import numpy as np
from numpy.typing import NDArray

# Octave offsets are drawn from [-OFFSET_RANGE, OFFSET_RANGE)
OFFSET_RANGE = 10_000.0


class Stream(IntEnum):
    """Seed offsets for the independent random streams."""

    OFFSETS = 0
    ROADS = 100
    CITY = 200
    PROPS = 300
    NOISE = 400


def make_rng(seed: int, stream: Stream) -> np.random.Generator:
    """Create the generator for one stream.

    Calling again with the same arguments restarts the stream.
    """
    return np.random.default_rng(seed + int(stream))


def derive_octave_offsets(
    rng: np.random.Generator,
    octaves: int,
) -> NDArray[np.float64]:
    """Draw one (x, z) sampling offset per octave.

    Args:
        rng: Generator for the OFFSETS stream.
        octaves: Number of octaves.

    Returns:
        Array of shape (octaves, 2).
    """
    return rng.uniform(-OFFSET_RANGE, OFFSET_RANGE, size=(octaves, 2))
