# -----------------------------
# FILE: distance_transform/post.py
# -----------------------------

from typing import Tuple
import numpy as np

from .config import INF
from .grid import FloatGrid, as_grid
from .utils import LOGGER


def _unreachable_mask(a: np.ndarray, inf: float, where: str) -> np.ndarray:
    mask = ~np.isfinite(a) | (a >= inf)
    if mask.any():
        LOGGER.warning(f"{where}: grid holds {int(mask.sum())} unreachable (sentinel/inf) cells")
    return mask


def sqrt_grid(grid, inf: float = INF) -> FloatGrid:
    """Element-wise square root, turning squared distances into distances.
    Assumes all values are non-negative. ``inf`` is the sentinel the grid was
    built with; cells at or above it are only reported, not changed.
    """
    a = as_grid(grid, FloatGrid).to_array()
    _unreachable_mask(a, inf, "sqrt_grid")
    return FloatGrid.from_array(np.sqrt(a))


def min_max_scaling(grid, value_range: Tuple[float, float] = (0.0, 255.0),
                    inf: float = INF) -> FloatGrid:
    """Map the values of ``grid`` linearly onto [value_range[0], value_range[1]].

    Min and max are taken over reachable cells only. Unreachable cells
    (non-finite, or at or above the ``inf`` sentinel) map to value_range[1].
    Reachable cells without spread (constant grid) map to zeros.
    """
    lo, hi = float(value_range[0]), float(value_range[1])
    a = as_grid(grid, FloatGrid).to_array()
    if a.size == 0:
        return FloatGrid.from_array(a)
    unreachable = _unreachable_mask(a, inf, "min_max_scaling")
    out = np.zeros_like(a)
    reach = a[~unreachable]
    if reach.size:
        vmin, vmax = float(reach.min()), float(reach.max())
        if vmin != vmax:
            out[~unreachable] = (reach - vmin) / (vmax - vmin) * (hi - lo) + lo
    out[unreachable] = hi
    return FloatGrid.from_array(out)
