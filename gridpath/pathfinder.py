"""
gridpath/pathfinder.py
======================

A* shortest paths on a 4-connected, unit-cost grid.

How this file fits in:
- Callers hand a `Grid` (or anything `Grid(...)` accepts) plus start/goal to
  `PathFinder.find_path(...)` and get back [start, ..., goal] or [].
- `PathFinder.search(...)` is the same search but returns a `SearchResult`
  with the step cost, number of expansions and why the search stopped.
- This module is pure: no printing, no globals, no state kept between calls.

Key design choices:
- Manhattan distance heuristic (admissible and consistent for 4-connected unit moves).
- Every node of one call lives in a list (the arena); `predecessor` is an index
  into it. The registry maps position -> arena index, so there is at most one
  node per cell and relaxation updates it in place.
- Superseded frontier entries are left in the heap. Each entry remembers the g
  it was pushed with; a pop whose g is worse than the registry's is stale and
  skipped, and a position is expanded at most once (closed set).
- Ties on f are broken by lowest h, then insertion order (or insertion order
  only with tie_break="fifo"), so results are reproducible.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set, Tuple

from gridpath.config import PathFinderConfig
from gridpath.grid import Coord, Grid, check_in_bounds, coerce_grid

# Why a search stopped
FOUND = "found"
UNREACHABLE = "unreachable"
BLOCKED_ENDPOINT = "blocked_endpoint"
EXPANSION_LIMIT = "expansion_limit"
CANCELLED = "cancelled"

StopCheck = Callable[[], bool]


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class SearchNode:
    """One grid cell as seen by the search. Identity is `position`."""
    position: Coord
    g: int
    h: int
    predecessor: Optional[int] = None  # arena index; None for the start node

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchResult:
    path: List[Coord] = field(default_factory=list)
    cost: Optional[int] = None  # number of steps, None unless found
    expansions: int = 0
    status: str = UNREACHABLE

    @property
    def found(self) -> bool:
        return self.status == FOUND


class PathFinder:
    """
    A* search driver.

    Holds only its (immutable) config, so one instance can serve any number of
    calls, including concurrent ones on a shared grid.
    """

    def __init__(self, config: Optional[PathFinderConfig] = None):
        self.config = config or PathFinderConfig()

    def find_path(self, grid, start: Coord, goal: Coord) -> List[Coord]:
        """
        Shortest path from start to goal.

        Returns:
            [start, ..., goal] if reachable, else [] (including blocked start/goal).

        Raises:
            InvalidInput for a malformed grid or out-of-bounds start/goal.
        """
        return self.search(grid, start, goal).path

    def search(self, grid, start: Coord, goal: Coord, should_stop: Optional[StopCheck] = None) -> SearchResult:
        """
        Run A* and report how it ended.

        Args:
            grid: `Grid` or a rectangular 2D array-like (truthy = blocked).
            start, goal: (row, col) inside the grid.
            should_stop: Optional callable checked once per loop iteration;
                         returning True cancels the search.
        """
        grid = coerce_grid(grid)
        start = check_in_bounds(grid, start, "start")
        goal = check_in_bounds(grid, goal, "goal")

        # A blocked endpoint is "no path", never an error
        if grid.is_blocked(start) or grid.is_blocked(goal):
            return SearchResult(status=BLOCKED_ENDPOINT)

        if start == goal:
            return SearchResult(path=[start], cost=0, status=FOUND)

        return self._run(grid, start, goal, should_stop)

    # ------------------------------------------------------------------
    def _run(self, grid: Grid, start: Coord, goal: Coord, should_stop: Optional[StopCheck]) -> SearchResult:
        max_expansions = self.config.max_expansions
        by_h = self.config.tie_break == "h"
        counter = itertools.count()

        arena: List[SearchNode] = [SearchNode(start, 0, manhattan_distance(start, goal))]
        registry: Dict[Coord, int] = {start: 0}
        closed: Set[Coord] = set()

        # Entries: (f, [h,] seq, g_at_push, arena_index). seq is unique, so the
        # trailing fields never take part in the comparison.
        frontier: List[Tuple[int, ...]] = []

        def push(idx: int) -> None:
            node = arena[idx]
            if by_h:
                heapq.heappush(frontier, (node.f, node.h, next(counter), node.g, idx))
            else:
                heapq.heappush(frontier, (node.f, next(counter), node.g, idx))

        push(0)
        expansions = 0

        while frontier:
            if should_stop is not None and should_stop():
                return SearchResult(expansions=expansions, status=CANCELLED)

            entry = heapq.heappop(frontier)
            pushed_g, idx = entry[-2], entry[-1]
            current = arena[idx]

            # Stale: a cheaper route to this cell was pushed after this entry
            if pushed_g > current.g or current.position in closed:
                continue

            if current.position == goal:
                path = self._reconstruct(arena, idx)
                return SearchResult(path=path, cost=current.g, expansions=expansions, status=FOUND)

            if max_expansions is not None and expansions >= max_expansions:
                return SearchResult(expansions=expansions, status=EXPANSION_LIMIT)
            closed.add(current.position)
            expansions += 1

            tentative = current.g + 1  # unit step cost
            for nb in grid.neighbors(current.position):
                if nb in closed:
                    continue

                nidx = registry.get(nb)
                if nidx is None:
                    arena.append(SearchNode(nb, tentative, manhattan_distance(nb, goal), idx))
                    nidx = len(arena) - 1
                    registry[nb] = nidx
                elif tentative < arena[nidx].g:
                    node = arena[nidx]
                    node.g = tentative
                    node.h = manhattan_distance(nb, goal)
                    node.predecessor = idx
                else:
                    continue

                push(nidx)

        return SearchResult(expansions=expansions, status=UNREACHABLE)

    @staticmethod
    def _reconstruct(arena: List[SearchNode], idx: Optional[int]) -> List[Coord]:
        path: List[Coord] = []
        while idx is not None:
            node = arena[idx]
            path.append(node.position)
            idx = node.predecessor
        path.reverse()
        return path


def find_path(grid, start: Coord, goal: Coord, config: Optional[PathFinderConfig] = None) -> List[Coord]:
    """Module-level shortcut for `PathFinder(config).find_path(grid, start, goal)`."""
    return PathFinder(config).find_path(grid, start, goal)
