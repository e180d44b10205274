# -----------------------------
# FILE: demo_circle.py
# -----------------------------

"""
Minimal smoke test. Draws a one-pixel ring on a square binary grid, runs the
distance transform, scales the distances to [0, 255] and saves them to edt.npy.

Usage:
  python demo_circle.py [--size 128] [--radius 32] [--config edt_config.json] [--out edt.npy]
"""

import argparse
import math
import os
import numpy as np

from distance_transform import BoolGrid, TransformConfig, dt2d, sqrt_grid, min_max_scaling
from distance_transform.utils import LOGGER


def ring(size: int, radius: int) -> BoolGrid:
    g = BoolGrid(size, size)
    c = size // 2
    for y in range(g.height):
        for x in range(g.width):
            r2 = (x - c)**2 + (y - c)**2
            g.set(x, y, (radius - 1)**2 < r2 < radius**2)
    return g


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=128)
    ap.add_argument("--radius", type=int, default=32)
    ap.add_argument("--config", type=str, default="edt_config.json")
    ap.add_argument("--out", type=str, default="edt.npy")
    args = ap.parse_args()

    cfg = TransformConfig.from_json(args.config) if os.path.exists(args.config) else TransformConfig()
    grid = ring(args.size, args.radius)
    d = sqrt_grid(dt2d(grid, cfg), cfg.inf)
    img = min_max_scaling(d, (0.0, 255.0), inf=math.sqrt(cfg.inf))
    LOGGER.info(f"max distance={d.to_array().max():.2f} px on {grid.width}x{grid.height} grid")

    np.save(args.out, img.to_array())
    LOGGER.info(f"Saved {args.out}")

if __name__ == "__main__":
    main()
