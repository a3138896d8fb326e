from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable

import numpy as np
from PIL import Image

from fracnoise.fields import fractal_noise_field, white_noise_field
from fracnoise.grid import Grid2D

logger = logging.getLogger(__name__)

Intensity = Callable[[np.ndarray], np.ndarray]


def intensity_u8(values: np.ndarray) -> np.ndarray:
    """Map samples to 8-bit gray as trunc(256 * v), saturated to [0, 255].

    NaN becomes 0.
    """

    v = np.asarray(values, dtype=np.float32) * np.float32(256.0)
    v = np.nan_to_num(v, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.trunc(v), 0.0, 255.0).astype(np.uint8)


def grid_to_image(grid: Grid2D, *, intensity: Intensity = intensity_u8) -> Image.Image:
    """Grayscale image where pixel (x, y) shows grid.get(x, y)."""

    img = np.asarray(intensity(grid.to_array()), dtype=np.uint8)
    if img.shape != grid.shape:
        raise ValueError("intensity mapping must preserve the grid shape")
    return Image.fromarray(img)


def grid_to_png_bytes(grid: Grid2D, *, intensity: Intensity = intensity_u8) -> bytes:
    out = io.BytesIO()
    grid_to_image(grid, intensity=intensity).save(out, format="PNG")
    return out.getvalue()


def save_grid_png(
    grid: Grid2D, path: str | Path, *, intensity: Intensity = intensity_u8
) -> Path:
    path = Path(path)
    grid_to_image(grid, intensity=intensity).save(path, format="PNG")
    logger.info(f"Wrote {grid.nx}x{grid.ny} image to {path}")
    return path


def save_white_noise_image(
    width: int, height: int, seed: int, path: str | Path
) -> Path:
    return save_grid_png(white_noise_field(width, height, seed), path)


def save_fractal_noise_image(
    n_octaves: int,
    seed: int,
    path: str | Path,
    *,
    base_amplitude: float = 0.5,
    persistence: float = 0.5,
) -> Path:
    grid = fractal_noise_field(
        n_octaves, seed, base_amplitude=base_amplitude, persistence=persistence
    )
    return save_grid_png(grid, path)
