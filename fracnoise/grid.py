from __future__ import annotations

import numpy as np

from .core import hash_chain, normalize_u32


class Grid2D:
    """Dense 2D field of float32 samples stored in one flat buffer.

    Cell (i, j) lives at ``data[i + j * nx]``: column i in [0, nx), row j in
    [0, ny). Out-of-range indices raise IndexError instead of wrapping.
    """

    def __init__(self, nx: int, ny: int, data: np.ndarray | None = None):
        nx = int(nx)
        ny = int(ny)
        if nx <= 0 or ny <= 0:
            raise ValueError("nx and ny must be > 0")

        if data is None:
            data = np.zeros(nx * ny, dtype=np.float32)
        else:
            data = np.array(data, dtype=np.float32).reshape(-1)
            if data.shape[0] != nx * ny:
                raise ValueError(f"data must hold nx*ny={nx * ny} samples")

        self.nx = nx
        self.ny = ny
        self.data = data

    @classmethod
    def zeros(cls, nx: int, ny: int) -> Grid2D:
        return cls(nx, ny)

    @classmethod
    def white_noise(cls, nx: int, ny: int, seed: int) -> Grid2D:
        """Fill nx*ny cells in linear order from one sequential hash chain."""
        nx = int(nx)
        ny = int(ny)
        if nx <= 0 or ny <= 0:
            raise ValueError("nx and ny must be > 0")
        return cls(nx, ny, normalize_u32(hash_chain(seed, nx * ny)))

    @property
    def shape(self) -> tuple[int, int]:
        return self.ny, self.nx

    @property
    def size(self) -> int:
        return self.nx * self.ny

    def _index(self, i: int, j: int) -> int:
        i = int(i)
        j = int(j)
        if not (0 <= i < self.nx and 0 <= j < self.ny):
            raise IndexError(
                f"cell ({i}, {j}) outside grid of size {self.nx}x{self.ny}"
            )
        return i + j * self.nx

    def get(self, i: int, j: int) -> float:
        return float(self.data[self._index(i, j)])

    def set(self, i: int, j: int, v: float) -> None:
        self.data[self._index(i, j)] = v

    def to_array(self) -> np.ndarray:
        # (ny, nx) view: arr[j, i] == get(i, j)
        return self.data.reshape(self.ny, self.nx)

    def copy(self) -> Grid2D:
        return Grid2D(self.nx, self.ny, self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return (
            self.nx == other.nx
            and self.ny == other.ny
            and np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        return f"Grid2D(nx={self.nx}, ny={self.ny})"
