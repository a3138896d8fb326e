from __future__ import annotations

import logging
import time

import numpy as np

from fracnoise.core import hash_u32
from fracnoise.fields import fractal_noise_field, white_noise_field

logger = logging.getLogger(__name__)


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    logger.info(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark of the hash chain and both noise fields."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    n = 1_000_000

    def run_hash() -> None:
        h = 0
        for _ in range(n):
            h = hash_u32(h)

    _timeit(f"Hash: {n} chained calls", run_hash)
    _timeit(
        "White noise: 512x512",
        lambda: white_noise_field(512, 512, seed=1),
    )

    def run_fractal() -> None:
        grid = fractal_noise_field(10, seed=4, base_amplitude=0.5, persistence=0.5)
        _ = float(np.mean(grid.data))

    _timeit("Fractal noise: 10 octaves (513x513)", run_fractal)


if __name__ == "__main__":
    main()
