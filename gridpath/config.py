from dataclasses import dataclass
from typing import Optional

from gridpath.errors import InvalidInput

# Secondary frontier keys after f:
#   "h"    -> lowest h first, then insertion order (default; prefers cells nearer the goal)
#   "fifo" -> insertion order only
TIE_BREAKS = ("h", "fifo")


@dataclass(frozen=True)
class PathFinderConfig:
    """Settings for a PathFinder. Immutable, so one instance can be shared across calls."""
    tie_break: str = "h"
    max_expansions: Optional[int] = None  # None = unlimited; safety valve for huge open grids

    def __post_init__(self):
        if self.tie_break not in TIE_BREAKS:
            raise InvalidInput(f"Unknown tie_break: '{self.tie_break}'. Available: {', '.join(TIE_BREAKS)}")
        if self.max_expansions is not None:
            if isinstance(self.max_expansions, bool) or not isinstance(self.max_expansions, int):
                raise InvalidInput(f"max_expansions must be an int or None, got {self.max_expansions!r}")
            if self.max_expansions < 0:
                raise InvalidInput(f"max_expansions must be non-negative, got {self.max_expansions}")
