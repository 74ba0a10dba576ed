# Section 0: Standard library imports
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

# Third-party imports
import numpy as np
import matplotlib.pyplot as plt

from gridpath.grid import Coord, check_in_bounds, coerce_grid

BLOCKED_CHAR = "#"
FREE_CHAR = "."
PATH_CHAR = "*"


# Section 1: Text rendering
def render_ascii(grid, path: Optional[Sequence[Coord]] = None) -> str:
    """
    Draw the grid as text: '#' blocked, '.' free, '*' path,
    'S'/'G' for the first/last cell of the path.

    Raises:
        InvalidInput if a path cell is outside the grid.
    """
    grid = coerce_grid(grid)
    canvas: List[List[str]] = [
        [BLOCKED_CHAR if blocked else FREE_CHAR for blocked in row]
        for row in grid.cells.tolist()
    ]

    if path:
        for cell in path:
            r, c = check_in_bounds(grid, cell, "path cell")
            canvas[r][c] = PATH_CHAR
        r0, c0 = path[0]
        r1, c1 = path[-1]
        canvas[r0][c0] = "S"
        canvas[r1][c1] = "G"

    return "\n".join("".join(row) for row in canvas)


# Section 2: Matplotlib rendering
def plot_path(grid, path: Sequence[Coord], save_path: Path | None = None, title: str | None = None):
    """
    Show the grid as an image (blocked = dark) with the path drawn on top.

    Args:
        grid: Grid or 2D array-like
        path: Cells from start to goal (may be empty)
        save_path: If given, the figure is written there (parent dirs created)
        title: Optional axes title

    Returns:
        The matplotlib Figure (caller decides whether to show/close it)
    """
    grid = coerce_grid(grid)

    fig, ax = plt.subplots(figsize=(max(4, grid.cols * 0.4), max(4, grid.rows * 0.4)))
    ax.imshow(grid.cells.astype(float), cmap="Greys", vmin=0.0, vmax=1.0, origin="upper")

    if path:
        rows = np.array([p[0] for p in path])
        cols = np.array([p[1] for p in path])
        # imshow puts column on x and row on y
        ax.plot(cols, rows, color="tab:blue", linewidth=2, label=f"path ({len(path) - 1} steps)")
        ax.scatter([cols[0]], [rows[0]], color="tab:green", s=80, zorder=3, label="start")
        ax.scatter([cols[-1]], [rows[-1]], color="tab:red", s=80, zorder=3, label="goal")
        ax.legend(loc="upper right", fontsize=8)

    ax.set_xticks(np.arange(-0.5, grid.cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, grid.rows, 1), minor=True)
    ax.grid(which="minor", color="lightgray", linewidth=0.5)
    ax.tick_params(which="minor", length=0)
    ax.set_xlabel("col")
    ax.set_ylabel("row")
    if title:
        ax.set_title(title, fontsize=12)

    fig.tight_layout()

    if save_path is not None:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    return fig
