"""
gridpath/path_utils.py
----------------------
Small helpers around a finished path: checking it, cross-checking its length
with plain BFS, and turning it into step tokens.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence

from gridpath.errors import InvalidInput
from gridpath.grid import Coord, check_in_bounds, coerce_grid

# (drow, dcol) -> token
MOVE_TOKENS: Dict[Coord, str] = {
    (-1, 0): "UP",
    (1, 0): "DOWN",
    (0, -1): "LEFT",
    (0, 1): "RIGHT",
}


def is_valid_path(grid, path: Sequence[Coord], start: Optional[Coord] = None, goal: Optional[Coord] = None) -> bool:
    """
    True if every cell is in bounds and free, consecutive cells are one
    orthogonal step apart, and the endpoints match `start`/`goal` when given.
    An empty path is never valid.
    """
    grid = coerce_grid(grid)
    if not path:
        return False
    if start is not None and tuple(path[0]) != tuple(start):
        return False
    if goal is not None and tuple(path[-1]) != tuple(goal):
        return False

    for cell in path:
        if not grid.is_free(tuple(cell)):
            return False
    for a, b in zip(path, path[1:]):
        if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
            return False
    return True


def bfs_distance(grid, start: Coord, goal: Coord) -> Optional[int]:
    """
    Brute-force shortest step count between two cells, or None if unreachable
    (or either endpoint is blocked). Used to cross-check A* on small grids.
    """
    grid = coerce_grid(grid)
    start = check_in_bounds(grid, start, "start")
    goal = check_in_bounds(grid, goal, "goal")
    if grid.is_blocked(start) or grid.is_blocked(goal):
        return None

    dist: Dict[Coord, int] = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return dist[cur]
        for nb in grid.neighbors(cur):
            if nb not in dist:
                dist[nb] = dist[cur] + 1
                queue.append(nb)
    return None


def path_to_moves(path: Sequence[Coord]) -> List[str]:
    """
    Convert [c0, c1, ...] into one token per step ("UP", "DOWN", "LEFT", "RIGHT").

    Raises:
        InvalidInput if two consecutive cells are not 4-connected neighbours.
    """
    moves: List[str] = []
    for a, b in zip(path, path[1:]):
        delta = (b[0] - a[0], b[1] - a[1])
        token = MOVE_TOKENS.get(delta)
        if token is None:
            raise InvalidInput(f"Cells {tuple(a)} -> {tuple(b)} are not a single orthogonal step")
        moves.append(token)
    return moves
