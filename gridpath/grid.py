"""
gridpath/grid.py
================

The immutable occupancy grid the planner searches over.

How this file fits in:
- `PathFinder` only ever reads a `Grid`; nothing here is mutated after construction.
- Cells are addressed as (row, col). The backing store is a read-only numpy
  boolean array where True means *blocked*.
- `Grid.from_ascii(...)` turns a text map into a grid ('#' = blocked by default),
  which is what `scripts/find_path.py` feeds in.
"""

from __future__ import annotations

import numbers
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from gridpath.errors import InvalidInput

# Type alias for grid coordinates
Coord = Tuple[int, int]

# Up, Right, Down, Left in (row, col). Fixed order keeps expansion deterministic.
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

# Characters with a special meaning in ASCII maps (both are free cells)
START_MARKER = "S"
GOAL_MARKER = "G"


def as_coord(value, name: str = "coordinate") -> Coord:
    """
    Normalise `value` into a (row, col) tuple of Python ints.

    Raises:
        InvalidInput if `value` is not a pair of integers.
    """
    try:
        row, col = value
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a (row, col) pair, got {value!r}") from None

    for part in (row, col):
        # bool is an Integral too, but True/False as a coordinate is always a bug
        if isinstance(part, bool) or not isinstance(part, numbers.Integral):
            raise InvalidInput(f"{name} must hold integers, got {value!r}")
    return int(row), int(col)


class Grid:
    """
    Rectangular 2D grid of free/blocked cells.

    Args:
        cells: Any rectangular 2D array-like (nested lists of 0/1 or bools, or a
               numpy array). Non-zero / truthy entries are blocked.
        markers: Optional named positions (e.g. "S"/"G" read from an ASCII map).

    Raises:
        InvalidInput for empty, zero-width, ragged, non-2D or non-numeric input.
    """

    def __init__(self, cells, markers: Dict[str, Coord] | None = None):
        if isinstance(cells, Grid):
            arr = cells.cells
        else:
            arr = self._to_array(cells)

        if arr.ndim != 2:
            raise InvalidInput(f"Grid must be 2-dimensional, got {arr.ndim} dimension(s)")
        rows, cols = arr.shape
        if rows == 0 or cols == 0:
            raise InvalidInput(f"Grid must have at least one row and one column, got shape {arr.shape}")

        # Private read-only copy so callers can't change the grid under a search
        self._cells = np.array(arr, dtype=bool, copy=True)
        self._cells.setflags(write=False)
        self.markers: Dict[str, Coord] = dict(markers or {})

    @staticmethod
    def _to_array(cells) -> np.ndarray:
        if isinstance(cells, np.ndarray):
            return Grid._check_dtype(cells)
        if isinstance(cells, (str, bytes)):
            raise InvalidInput("Grid cells must be a 2D array, not a string (use Grid.from_ascii)")

        try:
            rows = list(cells)
        except TypeError:
            raise InvalidInput(f"Grid cells must be a 2D array-like, got {type(cells).__name__}") from None
        if not rows:
            raise InvalidInput("Grid must have at least one row")

        width = None
        for r, row in enumerate(rows):
            try:
                n = len(row)
            except TypeError:
                raise InvalidInput(f"Grid row {r} is not a sequence: {row!r}") from None
            if width is None:
                width = n
            elif n != width:
                raise InvalidInput(f"Non-rectangular grid at row {r}: expected width {width}, got {n}")
        try:
            arr = np.asarray(rows)
        except ValueError as e:
            raise InvalidInput(f"Grid cells must form a rectangular 2D array: {e}") from e
        return Grid._check_dtype(arr)

    @staticmethod
    def _check_dtype(arr: np.ndarray) -> np.ndarray:
        # Only bool/int/float cells; a non-empty string would otherwise cast to True (blocked)
        if arr.size and arr.dtype.kind not in "biuf":
            raise InvalidInput(f"Grid cells must be bools or numbers, got dtype {arr.dtype} (use Grid.from_ascii for text)")
        return arr

    # ------------------------------------------------------------------
    @classmethod
    def from_ascii(cls, text: str, blocked: str = "#") -> "Grid":
        """
        Parse a text map, one line per row.

        Characters in `blocked` are obstacles; anything else is free. 'S' and 'G'
        are free cells that are also recorded in `grid.markers`.
        """
        lines = text.strip("\n").splitlines()
        if not lines:
            raise InvalidInput("ASCII map is empty")

        w = len(lines[0])
        markers: Dict[str, Coord] = {}
        rows: List[List[bool]] = []
        for r, line in enumerate(lines):
            if len(line) != w:
                raise InvalidInput(f"Non-rectangular ASCII map at row {r}: expected width {w}, got {len(line)}")
            row: List[bool] = []
            for c, ch in enumerate(line):
                if ch in (START_MARKER, GOAL_MARKER):
                    if ch in markers:
                        raise InvalidInput(f"ASCII map has more than one '{ch}' marker (row {r})")
                    markers[ch] = (r, c)
                row.append(ch in blocked)
            rows.append(row)

        return cls(rows, markers=markers)

    # ------------------------------------------------------------------
    @property
    def cells(self) -> np.ndarray:
        """Read-only boolean array, True = blocked."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        return self._cells.shape

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_blocked(self, coord: Coord) -> bool:
        return bool(self._cells[coord[0], coord[1]])

    def is_free(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and not self.is_blocked(coord)

    def neighbors(self, coord: Coord) -> Iterator[Coord]:
        """In-bounds free orthogonal neighbours, in up/right/down/left order."""
        r, c = coord
        for dr, dc in DIRECTIONS:
            nb = (r + dr, c + dc)
            if self.is_free(nb):
                yield nb

    def free_count(self) -> int:
        return int(self._cells.size - np.count_nonzero(self._cells))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, blocked={int(np.count_nonzero(self._cells))})"


def coerce_grid(grid) -> Grid:
    """Return `grid` as a `Grid`, building one from an array-like when needed."""
    if isinstance(grid, Grid):
        return grid
    return Grid(grid)


def check_in_bounds(grid: Grid, coord, name: str) -> Coord:
    """Validate `coord` against `grid` bounds; returns the normalised tuple."""
    pos = as_coord(coord, name)
    if not grid.in_bounds(pos):
        raise InvalidInput(f"{name} {pos} is outside the {grid.rows}x{grid.cols} grid")
    return pos


def grid_from_rows(rows: Sequence[str], blocked: str = "#") -> Grid:
    """Convenience for tests and callers holding a list of row strings."""
    return Grid.from_ascii("\n".join(rows), blocked=blocked)
