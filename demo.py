"""
Demonstration scripts for the maze search system.
"""

import logging
import sys

from ascii_render import StepRecorder, render_grid, render_tokens, render_tree
from maze_parser import find_endpoints, parse_maze
from maze_search import SOLVERS, NotFound

# Named mazes in the concise format: _ empty, # wall, S start, F finish
LAYOUTS = dict(
    classic="_#_#_|#___#|_#___|__S##|_____|F_#_#",
    corridor="S____|####_|_____|_####|____F",
    walled_in="_#_|#S#|_#F",
    open_field="S_______|________|________|_______F",
)


def solve_demo(layout: str, algorithm: str, frames: bool = False) -> None:
    """Solve one layout with one algorithm, printing the result."""
    grid = parse_maze(LAYOUTS[layout])
    start, finish = find_endpoints(grid)

    recorder = StepRecorder(echo=print if frames else None)
    result = SOLVERS[algorithm](grid, start, finish, render=recorder)

    print("=" * 40)
    print(f"{algorithm.upper()} on '{layout}' ({grid.row_count}x{grid.col_count})")
    print("=" * 40)
    if isinstance(result, NotFound):
        print(f"NOT FOUND after exploring {result.explored} positions")
    else:
        print(render_tree(result.root))
        print()
        print(f"{len(result)} positions, {len(recorder)} frames")
    print()
    print("\n".join(render_grid(grid.snapshot(), title=algorithm.upper())))
    print(render_tokens(grid.snapshot()))


def demo() -> None:
    """Run both searches over every layout."""
    for layout in LAYOUTS:
        for algorithm in SOLVERS:
            solve_demo(layout, algorithm)
            print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    if len(sys.argv) > 1:
        algorithms = [sys.argv[2]] if len(sys.argv) > 2 else list(SOLVERS)
        for algorithm in algorithms:
            solve_demo(sys.argv[1], algorithm, frames=True)
    else:
        demo()
