from __future__ import annotations

import logging

from .config import FieldConfig
from .grid import Grid2D
from .octaves import OctaveCollection

logger = logging.getLogger(__name__)


def white_noise_field(width: int, height: int, seed: int) -> Grid2D:
    """Uncorrelated samples in [0, 1], one hash-chain step per cell."""

    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")

    logger.debug(f"White noise field {width}x{height} (seed={int(seed)})")
    return Grid2D.white_noise(width, height, seed)


def fractal_noise_field(
    n_octaves: int,
    seed: int,
    base_amplitude: float = 0.5,
    persistence: float = 0.5,
) -> Grid2D:
    """Fractal value noise of side 2**(n_octaves - 1) + 1.

    The output range depends on `base_amplitude` and `persistence`; values
    are not rescaled to [0, 1].
    """

    n_octaves = int(n_octaves)
    if n_octaves < 1:
        raise ValueError("n_octaves must be >= 1")

    octaves = OctaveCollection.fractal_noise(n_octaves, seed)
    logger.debug(
        f"Fractal noise field {octaves.output_side}x{octaves.output_side} "
        f"(octaves={n_octaves}, seed={int(seed)})"
    )
    return octaves.create_fractal_map(float(base_amplitude), float(persistence))


def field_from_config(config: FieldConfig) -> Grid2D:
    if config.kind == "white":
        return white_noise_field(config.width, config.height, config.seed)
    return fractal_noise_field(
        config.n_octaves,
        config.seed,
        base_amplitude=config.base_amplitude,
        persistence=config.persistence,
    )
