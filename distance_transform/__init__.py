# =============================
# distance_transform (pure Python/numpy)
# Version: 0.1.0
# =============================
#
# Squared Euclidean distance transform of binary grids, after
# "Distance Transforms of Sampled Functions" (P. Felzenszwalb and
# D. Huttenlocher). It provides:
# - Grid / BoolGrid / FloatGrid: bounds-checked 2D grids addressed by (x, y)
# - edt_1d: linear-time lower envelope of parabolas on a cost array
# - dt1d / dt2d / dt2d_cost: 1D and separable 2D transforms
# - edt_from_occupancy: metric distance straight from a numpy mask
# - sqrt_grid / min_max_scaling: post-processing for display
# - TransformConfig: JSON-loadable settings (sentinel, unreachable policy)
# - Error system with codes and hints
#
# Python 3.9+
# Requires: numpy, matplotlib (only for visualize_edt.py)
#
# Example:
#
#     from distance_transform import BoolGrid, dt2d, sqrt_grid
#
#     g = BoolGrid(5, 5)
#     g.set(2, 2, True)
#     d2 = dt2d(g)          # d2.get(0, 0) == 8.0
#     d = sqrt_grid(d2)

from .errors import DTError, ConfigError, GridIndexError, GridShapeError, NoFeatureError
from .config import INF, TransformConfig
from .grid import Grid, BoolGrid, FloatGrid
from .dt import edt_1d, cost_from_binary, dt2d_cost, dt1d, dt2d, edt_from_occupancy
from .post import sqrt_grid, min_max_scaling

__all__ = [
    "DTError",
    "ConfigError",
    "GridIndexError",
    "GridShapeError",
    "NoFeatureError",
    "INF",
    "TransformConfig",
    "Grid",
    "BoolGrid",
    "FloatGrid",
    "edt_1d",
    "cost_from_binary",
    "dt2d_cost",
    "dt1d",
    "dt2d",
    "edt_from_occupancy",
    "sqrt_grid",
    "min_max_scaling",
]

__version__ = "0.1.0"
