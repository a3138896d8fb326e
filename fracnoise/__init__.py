from .config import FieldConfig
from .core import hash_chain, hash_u32, interpolate, normalize_u32
from .fields import field_from_config, fractal_noise_field, white_noise_field
from .grid import Grid2D
from .octaves import OctaveCollection

__all__ = [
    "FieldConfig",
    "Grid2D",
    "OctaveCollection",
    "field_from_config",
    "fractal_noise_field",
    "hash_chain",
    "hash_u32",
    "interpolate",
    "normalize_u32",
    "white_noise_field",
]
