# -----------------------------
# FILE: distance_transform/dt.py
# -----------------------------

import math
from typing import Optional, Sequence
import numpy as np

from .config import TransformConfig
from .errors import GridShapeError, NoFeatureError
from .grid import BoolGrid, FloatGrid, as_grid
from .utils import LOGGER

# Felzenszwalb & Huttenlocher 1D squared distance transform, applied along
# columns and then rows for the exact 2D squared Euclidean distance.

def edt_1d(f: np.ndarray) -> np.ndarray:
    """d[q] = min_p (q - p)^2 + f[p] for a 1D array of costs."""
    f = np.asarray(f, dtype=float)
    n = f.shape[0]
    d = np.zeros(n, dtype=float)
    if n == 0:
        return d
    v = np.zeros(n, dtype=int)        # roots of the envelope parabolas, v[0..k]
    z = np.zeros(n + 1, dtype=float)  # z[i]: first q where parabola v[i] is lowest

    k = 0
    v[0] = 0
    z[0] = -np.inf
    z[1] = np.inf

    def sep(u: int, w: int) -> float:
        # Intersection of parabolas
        return ((f[w] + w*w) - (f[u] + u*u)) / (2*(w - u))

    for q in range(1, n):
        s = sep(v[k], q)
        while s <= z[k]:
            k -= 1
            s = sep(v[k], q)
        k += 1
        v[k] = q
        z[k] = s
        z[k+1] = np.inf

    k = 0
    for q in range(n):
        while z[k+1] <= q:
            k += 1
        dq = q - v[k]
        d[q] = dq*dq + f[v[k]]
    return d


def _surface_unreachable(d: np.ndarray, cfg: TransformConfig) -> np.ndarray:
    unreachable = d >= cfg.inf
    if not unreachable.any():
        return d
    count = int(unreachable.sum())
    if cfg.unreachable == "raise":
        raise NoFeatureError(f"{count} of {d.size} cells have no feature cell in reach",
                             hint="Add at least one True cell or set unreachable='sentinel'.")
    LOGGER.info(f"{count} of {d.size} cells unreachable, reported as {cfg.unreachable}")
    d[unreachable] = math.inf if cfg.unreachable == "inf" else cfg.inf
    return d


def cost_from_binary(grid, cfg: Optional[TransformConfig] = None) -> FloatGrid:
    """True (feature) -> 0, False -> cfg.inf."""
    cfg = (cfg or TransformConfig()).validate()
    grid = as_grid(grid, BoolGrid)
    return FloatGrid.from_array(np.where(grid.to_array(), 0.0, float(cfg.inf)))


def dt2d_cost(costs, cfg: Optional[TransformConfig] = None) -> FloatGrid:
    """Squared distance transform of a cost grid.

    Returns a new grid holding min over (x', y') of
    (x - x')^2 + (y - y')^2 + cost(x', y'); ``costs`` is not modified.
    """
    cfg = (cfg or TransformConfig()).validate()
    im = as_grid(costs, FloatGrid).copy()
    width, height = im.width, im.height
    if width == 0 or height == 0:
        return im
    cfg.check_sentinel(width, height)
    LOGGER.debug(f"dt2d: {width}x{height} grid")

    # transform along columns
    for x in range(width):
        im.set_column(x, edt_1d(im.column(x)))
    # then rows
    for y in range(height):
        im.set_row(y, edt_1d(im.row(y)))

    return FloatGrid.from_array(_surface_unreachable(im.to_array(), cfg))


def dt1d(values: Sequence[bool], cfg: Optional[TransformConfig] = None) -> np.ndarray:
    """Squared distance of every position to the nearest True entry."""
    cfg = (cfg or TransformConfig()).validate()
    b = np.asarray(values, dtype=bool)
    if b.ndim != 1:
        raise GridShapeError(f"Expected a 1D sequence, got shape {b.shape}")
    if b.size == 0:
        return np.zeros(0, dtype=float)
    cfg.check_sentinel(b.size, 1)
    return _surface_unreachable(edt_1d(np.where(b, 0.0, cfg.inf)), cfg)


def dt2d(grid, cfg: Optional[TransformConfig] = None) -> FloatGrid:
    """Squared Euclidean distance transform of a binary grid (True = feature)."""
    cfg = (cfg or TransformConfig()).validate()
    return dt2d_cost(cost_from_binary(grid, cfg), cfg)


def edt_from_occupancy(occ: np.ndarray, resolution: Optional[float] = None,
                       cfg: Optional[TransformConfig] = None) -> np.ndarray:
    """Compute Euclidean distance (in resolution units) from an HxW bool mask (True=feature).
    Based on two-pass 1D squared distance transform.
    """
    cfg = (cfg or TransformConfig()).validate()
    if resolution is None:
        resolution = cfg.resolution
    occ = np.asarray(occ, dtype=bool)
    if occ.ndim != 2:
        raise GridShapeError(f"Expected an HxW mask, got shape {occ.shape}")
    d2 = dt2d(BoolGrid.from_array(occ), cfg).to_array()
    # sqrt and scale
    return (np.sqrt(d2) * float(resolution)).astype(np.float32)
