# -----------------------------
# FILE: distance_transform/grid.py
# -----------------------------

"""Dense two-dimensional grids addressed by (x, y).

Cells are stored in a numpy array of shape (height, width), so
``grid.get(x, y) == grid.to_array()[y, x]``.
"""

from typing import Any, Iterator, List, Optional, Tuple
import numpy as np

from .errors import GridIndexError, GridShapeError


class Grid:
    """A W x H grid of values of one dtype. No resizing after construction."""
    dtype: Any = None

    def __init__(self, width: int, height: int, fill: Any = None, *, dtype: Any = None):
        dtype = dtype if dtype is not None else self.dtype
        if dtype is None:
            dtype = float
        if width < 0 or height < 0:
            raise GridShapeError(f"Grid dimensions must be >= 0, got {width}x{height}")
        self._data = np.zeros((int(height), int(width)), dtype=dtype)
        if fill is not None:
            self._data[...] = fill

    @classmethod
    def from_array(cls, array) -> "Grid":
        a = np.asarray(array)
        if a.ndim != 2:
            raise GridShapeError(f"Expected a 2D array, got shape {a.shape}")
        g = cls.__new__(cls)
        dtype = cls.dtype if cls.dtype is not None else a.dtype
        g._data = np.array(a, dtype=dtype, copy=True)
        return g

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise GridIndexError(f"Position ({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int):
        self._check(x, y)
        return self._data[y, x].item()

    def get_unchecked(self, x: int, y: int):
        return self._data[y, x].item()

    def set(self, x: int, y: int, value):
        self._check(x, y)
        self._data[y, x] = value

    def column(self, x: int) -> np.ndarray:
        if not 0 <= x < self.width:
            raise GridIndexError(f"Column {x} outside {self.width}x{self.height} grid")
        return self._data[:, x].copy()

    def set_column(self, x: int, values):
        if not 0 <= x < self.width:
            raise GridIndexError(f"Column {x} outside {self.width}x{self.height} grid")
        values = np.asarray(values)
        if values.shape != (self.height,):
            raise GridShapeError(f"Column needs {self.height} values, got shape {values.shape}")
        self._data[:, x] = values

    def row(self, y: int) -> np.ndarray:
        if not 0 <= y < self.height:
            raise GridIndexError(f"Row {y} outside {self.width}x{self.height} grid")
        return self._data[y, :].copy()

    def set_row(self, y: int, values):
        if not 0 <= y < self.height:
            raise GridIndexError(f"Row {y} outside {self.width}x{self.height} grid")
        values = np.asarray(values)
        if values.shape != (self.width,):
            raise GridShapeError(f"Row needs {self.width} values, got shape {values.shape}")
        self._data[y, :] = values

    def iter(self) -> Iterator[Tuple[int, int, Any]]:
        """Yields (x, y, value) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self._data[y, x].item()

    def __iter__(self):
        return self.iter()

    def copy(self) -> "Grid":
        return type(self).from_array(self._data)

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def to_list(self) -> List[Any]:
        # vec[y*width + x] == grid[x, y]
        return self._data.reshape(-1).tolist()

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


class BoolGrid(Grid):
    dtype = bool


class FloatGrid(Grid):
    dtype = np.float64


def as_grid(values, cls: Optional[type] = None) -> Grid:
    """Accept a Grid or a 2D array-like (indexed [y, x]) and return a Grid of ``cls``."""
    cls = cls or Grid
    if isinstance(values, cls):
        return values
    if isinstance(values, Grid):
        return cls.from_array(values._data)
    return cls.from_array(values)
