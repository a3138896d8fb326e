from __future__ import annotations

import logging
import math
from typing import Iterator

import numpy as np

from .core import U32_MASK, hash_u32, interpolate
from .grid import Grid2D

logger = logging.getLogger(__name__)


def _check_finite(name: str, value: float) -> np.float32:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    return np.float32(value)


class OctaveCollection:
    """White-noise grids of side 2**i + 1, ordered coarsest first.

    Every octave spans the same sampling domain [0, max_dim] with
    max_dim = 2**(n_octaves - 1); finer octaves just cut it into more cells.
    """

    def __init__(self, octaves: list[Grid2D] | tuple[Grid2D, ...]):
        octaves = tuple(octaves)
        for k, octave in enumerate(octaves):
            side = 2**k + 1
            if octave.nx != side or octave.ny != side:
                raise ValueError(
                    f"octave {k} must be {side}x{side}, got {octave.nx}x{octave.ny}"
                )
        self._octaves = octaves

    @classmethod
    def fractal_noise(cls, n_octaves: int, seed: int) -> OctaveCollection:
        n_octaves = int(n_octaves)
        if n_octaves < 0:
            raise ValueError("n_octaves must be >= 0")

        base_seed = hash_u32(seed)
        octaves = []
        for i in range(n_octaves):
            oct_dim = 2**i + 1
            octaves.append(
                Grid2D.white_noise(oct_dim, oct_dim, (base_seed + i) & U32_MASK)
            )
        logger.debug(f"Built {n_octaves} octaves from seed {int(seed)}")
        return cls(octaves)

    @property
    def octaves(self) -> tuple[Grid2D, ...]:
        return self._octaves

    @property
    def n_octaves(self) -> int:
        return len(self._octaves)

    def __len__(self) -> int:
        return len(self._octaves)

    def __iter__(self) -> Iterator[Grid2D]:
        return iter(self._octaves)

    def __getitem__(self, k: int) -> Grid2D:
        return self._octaves[k]

    @property
    def max_dim(self) -> int:
        if not self._octaves:
            raise ValueError("octave collection is empty")
        return 2 ** (len(self._octaves) - 1)

    @property
    def output_side(self) -> int:
        return self.max_dim + 1

    def _sample_octave(
        self, octave: Grid2D, ii: np.ndarray, jj: np.ndarray
    ) -> np.ndarray:
        n_side = octave.nx - 1
        sz = self.max_dim // n_side

        ni = ii // sz
        nj = jj // sz
        ri = (ii % sz).astype(np.float32) / np.float32(sz)
        rj = (jj % sz).astype(np.float32) / np.float32(sz)

        # Only the upper corner is clamped; the edge value is repeated.
        ni1 = np.minimum(ni + 1, n_side)
        nj1 = np.minimum(nj + 1, n_side)

        cells = octave.to_array()
        lox_loy = cells[nj, ni]
        hix_loy = cells[nj, ni1]
        lox_hiy = cells[nj1, ni]
        hix_hiy = cells[nj1, ni1]
        return interpolate(ri, rj, lox_loy, lox_hiy, hix_loy, hix_hiy)

    def _coords(self, ii, jj) -> tuple[np.ndarray, np.ndarray]:
        ii = np.asarray(ii)
        jj = np.asarray(jj)
        if ii.shape != jj.shape:
            raise ValueError("coordinate arrays must have the same shape")
        if not (
            np.issubdtype(ii.dtype, np.integer) and np.issubdtype(jj.dtype, np.integer)
        ):
            raise ValueError("coordinates must be integers")

        max_dim = self.max_dim
        lo = min(int(np.min(ii, initial=0)), int(np.min(jj, initial=0)))
        hi = max(int(np.max(ii, initial=0)), int(np.max(jj, initial=0)))
        if lo < 0 or hi > max_dim:
            raise IndexError(f"coordinates must be in [0, {max_dim}]")
        return ii.astype(np.int64), jj.astype(np.int64)

    def sample(self, i: int, j: int) -> np.ndarray:
        """Per-octave bilinear samples at (i, j), coarsest octave first."""
        ii, jj = self._coords(int(i), int(j))
        return np.stack(
            [self._sample_octave(octave, ii, jj) for octave in self._octaves]
        ).astype(np.float32)

    def sample_many(self, ii: np.ndarray, jj: np.ndarray) -> np.ndarray:
        """Vectorized `sample`; result has shape (n_octaves, *ii.shape)."""
        ii, jj = self._coords(ii, jj)
        return np.stack(
            [self._sample_octave(octave, ii, jj) for octave in self._octaves]
        ).astype(np.float32)

    @staticmethod
    def _blend(
        components: np.ndarray, base_amplitude: float, persistence: float
    ) -> np.ndarray:
        amp = _check_finite("base_amplitude", base_amplitude)
        persi = _check_finite("persistence", persistence)

        total = np.zeros(components.shape[1:], dtype=np.float32)
        for comp in components:
            total = total + comp * amp
            amp = persi * amp
        return total

    def fractal_value(
        self, i: int, j: int, base_amplitude: float, persistence: float
    ) -> float:
        return float(self._blend(self.sample(i, j), base_amplitude, persistence))

    def create_fractal_map(self, base_amplitude: float, persistence: float) -> Grid2D:
        """Weighted octave sum over the whole (max_dim + 1)**2 domain.

        Amplitude starts at `base_amplitude` and is multiplied by
        `persistence` after each octave. The result is not renormalized.
        """

        side = self.output_side
        jj, ii = np.meshgrid(
            np.arange(side, dtype=np.int64),
            np.arange(side, dtype=np.int64),
            indexing="ij",
        )
        components = self.sample_many(ii, jj)
        total = self._blend(components, base_amplitude, persistence)
        logger.debug(
            f"Composited {self.n_octaves} octaves into a {side}x{side} map "
            f"(base_amplitude={base_amplitude}, persistence={persistence})"
        )
        return Grid2D(side, side, total)
