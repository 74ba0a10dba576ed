# Section 0: Standard library imports
import sys
import argparse
from pathlib import Path

# Third-party imports
import matplotlib.pyplot as plt

# Add project root to Python path for imports
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Project imports
from gridpath.config import PathFinderConfig, TIE_BREAKS
from gridpath.errors import InvalidInput
from gridpath.grid import Grid, START_MARKER, GOAL_MARKER
from gridpath.path_utils import path_to_moves
from gridpath.pathfinder import PathFinder
from gridpath.render import plot_path, render_ascii


# Section 1: Argument helpers
def parse_coord(text: str):
    """'3,4' -> (3, 4)"""
    parts = text.replace(" ", "").split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL, got '{text}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected integer ROW,COL, got '{text}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a shortest 4-connected path on an ASCII grid map with A*.")
    parser.add_argument(
        "map",
        type=str,
        help="Path to an ASCII map file (one row per line, '#' = blocked, optional S/G markers)")
    parser.add_argument(
        "--start",
        type=parse_coord,
        default=None,
        help="Start cell as ROW,COL (defaults to the map's 'S')")
    parser.add_argument(
        "--goal",
        type=parse_coord,
        default=None,
        help="Goal cell as ROW,COL (defaults to the map's 'G')")
    parser.add_argument(
        "--blocked",
        type=str,
        default="#",
        help="Characters that count as blocked cells (default: '#')")
    parser.add_argument(
        "--tie-break",
        choices=TIE_BREAKS,
        default="h",
        help="Secondary frontier ordering when f ties")
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Give up after expanding this many cells")
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show the grid and path with matplotlib")
    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Optional output path for the plot image")
    return parser


# Section 2: Driver
def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    map_path = Path(args.map)
    if not map_path.exists():
        print(f"\n❌ Error: Map file not found: {map_path}")
        return 1

    try:
        grid = Grid.from_ascii(map_path.read_text(), blocked=args.blocked)
        start = args.start if args.start is not None else grid.markers.get(START_MARKER)
        goal = args.goal if args.goal is not None else grid.markers.get(GOAL_MARKER)
        if start is None or goal is None:
            raise InvalidInput("Start and goal must be given (--start/--goal) or marked with S/G in the map")

        config = PathFinderConfig(tie_break=args.tie_break, max_expansions=args.max_expansions)
        result = PathFinder(config).search(grid, start, goal)
    except InvalidInput as e:
        print(f"\n❌ Error: {e}")
        return 1

    print(f"\n{'='*60}")
    print(f"A* on {map_path.name}: {grid.rows}x{grid.cols}, start={start}, goal={goal}")
    print(f"{'='*60}")
    print(f"Status:     {result.status}")
    print(f"Expansions: {result.expansions}")

    if result.found:
        print(f"Steps:      {result.cost}")
        print(f"Moves:      {' '.join(path_to_moves(result.path)) or '(none)'}")
    else:
        print("No path found.")

    print()
    print(render_ascii(grid, result.path))
    print(f"{'='*60}\n")

    if args.plot or args.save:
        save_path = Path(args.save) if args.save else None
        plot_path(grid, result.path, save_path=save_path, title=f"{map_path.name}: {result.status}")
        if save_path is not None:
            print(f"Plot saved to: {save_path}")
        if args.plot:
            plt.show()
        plt.close("all")

    return 0


if __name__ == "__main__":
    sys.exit(main())
