from __future__ import annotations

import logging
import sys
from pathlib import Path


def main() -> None:
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))

    from viz.export import save_fractal_noise_image, save_white_noise_image

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    out_dir = root / "assets"
    out_dir.mkdir(parents=True, exist_ok=True)

    save_white_noise_image(100, 100, 1, out_dir / "white_noise.png")
    # 11 octaves -> 1025x1025.
    save_fractal_noise_image(
        11,
        4,
        out_dir / "fractal_noise.png",
        base_amplitude=0.5,
        persistence=0.5,
    )


if __name__ == "__main__":
    main()
