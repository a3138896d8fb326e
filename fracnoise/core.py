from __future__ import annotations

import numpy as np

U32_MASK = 0xFFFFFFFF
U32_MAX = U32_MASK

_ONE = np.float32(1.0)
_U32_MAX_F32 = np.float32(U32_MAX)


def hash_u32(seed: int) -> int:
    """Integer avalanche hash over 32-bit unsigned values.

    Every step wraps modulo 2**32. Note that 0 is a fixed point.
    """

    h = int(seed) & U32_MASK
    h = (h - (h << 6)) & U32_MASK
    h = h ^ (h >> 17)
    h = (h - (h << 9)) & U32_MASK
    h = (h ^ (h << 4)) & U32_MASK
    h = (h - (h << 3)) & U32_MASK
    h = (h ^ (h << 10)) & U32_MASK
    h = h ^ (h >> 15)
    return h


def hash_chain(seed: int, n: int) -> np.ndarray:
    """First `n` outputs of the chain hash(seed), hash(hash(seed)), ..."""

    n = int(n)
    if n < 0:
        raise ValueError("n must be >= 0")

    out = np.empty(n, dtype=np.uint32)
    h = int(seed) & U32_MASK
    for k in range(n):
        h = hash_u32(h)
        out[k] = h
    return out


def normalize_u32(values: np.ndarray) -> np.ndarray:
    """Map 32-bit hash outputs onto [0, 1] in single precision."""
    v = np.asarray(values, dtype=np.uint32).astype(np.float32)
    return v / _U32_MAX_F32


def interpolate(
    i: np.ndarray,
    j: np.ndarray,
    lox_loy: np.ndarray,
    lox_hiy: np.ndarray,
    hix_loy: np.ndarray,
    hix_hiy: np.ndarray,
) -> np.ndarray:
    """Bilinear blend of four cell corners at fractional offset (i, j)."""

    i = np.asarray(i, dtype=np.float32)
    j = np.asarray(j, dtype=np.float32)
    if np.any(i < 0.0) or np.any(i > 1.0) or np.any(np.isnan(i)):
        raise ValueError("i must be in [0, 1]")
    if np.any(j < 0.0) or np.any(j > 1.0) or np.any(np.isnan(j)):
        raise ValueError("j must be in [0, 1]")

    lox_loy = np.asarray(lox_loy, dtype=np.float32)
    lox_hiy = np.asarray(lox_hiy, dtype=np.float32)
    hix_loy = np.asarray(hix_loy, dtype=np.float32)
    hix_hiy = np.asarray(hix_hiy, dtype=np.float32)

    return (
        (_ONE - i) * (_ONE - j) * lox_loy
        + (_ONE - i) * j * lox_hiy
        + i * (_ONE - j) * hix_loy
        + i * j * hix_hiy
    )
