from __future__ import annotations

import math
from dataclasses import dataclass

FIELD_KINDS = ("white", "fractal")


@dataclass(frozen=True)
class FieldConfig:
    """Parameters for one noise field.

    White fields use `width`/`height`; fractal fields use `n_octaves` and
    always come out square with side 2**(n_octaves - 1) + 1.
    """

    kind: str
    seed: int = 0
    width: int = 0
    height: int = 0
    n_octaves: int = 0
    base_amplitude: float = 0.5
    persistence: float = 0.5

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"unknown field kind: {self.kind}")
        if self.kind == "white":
            if int(self.width) <= 0 or int(self.height) <= 0:
                raise ValueError("width and height must be > 0")
        else:
            if int(self.n_octaves) < 1:
                raise ValueError("n_octaves must be >= 1")
        if not math.isfinite(float(self.base_amplitude)):
            raise ValueError("base_amplitude must be finite")
        if not math.isfinite(float(self.persistence)):
            raise ValueError("persistence must be finite")

    @classmethod
    def white(cls, *, width: int, height: int, seed: int = 0) -> FieldConfig:
        return cls(kind="white", seed=int(seed), width=int(width), height=int(height))

    @classmethod
    def fractal(
        cls,
        *,
        n_octaves: int,
        seed: int = 0,
        base_amplitude: float = 0.5,
        persistence: float = 0.5,
    ) -> FieldConfig:
        return cls(
            kind="fractal",
            seed=int(seed),
            n_octaves=int(n_octaves),
            base_amplitude=float(base_amplitude),
            persistence=float(persistence),
        )

    @property
    def side(self) -> int:
        if self.kind != "fractal":
            raise ValueError("side is only defined for fractal fields")
        return 2 ** (int(self.n_octaves) - 1) + 1

    @property
    def shape(self) -> tuple[int, int]:
        if self.kind == "fractal":
            return self.side, self.side
        return int(self.height), int(self.width)
