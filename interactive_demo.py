"""
Interactive demo for maze search.
Step through the frames of a BFS or DFS exploration with keyboard commands.
"""

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import StepRecorder, render_grid
from demo import LAYOUTS
from maze_parser import find_endpoints, parse_maze
from maze_search import SOLVERS, NotFound, SearchResult
from maze_types import Snapshot, Visited


class InteractiveDemo:
    """Replay a recorded search one grid state at a time."""

    def __init__(self, definition: str, algorithm: str = "bfs") -> None:
        self.definition = definition
        self.console = Console()
        self.status_message = "Ready"
        self.frames: list[Snapshot] = []
        self.result: SearchResult | None = None
        self.step = 0
        self.algorithm = algorithm
        self.run_search(algorithm)

    def run_search(self, algorithm: str) -> None:
        """Solve a fresh copy of the maze and record every frame."""
        grid = parse_maze(self.definition)
        start, finish = find_endpoints(grid)
        recorder = StepRecorder()
        recorder(grid.snapshot())

        self.algorithm = algorithm
        self.result = SOLVERS[algorithm](grid, start, finish, render=recorder)
        self.frames = recorder.frames
        self.step = 0

        if isinstance(self.result, NotFound):
            self.status_message = f"{algorithm.upper()}: finish unreachable ({self.result.explored} explored)"
        else:
            self.status_message = f"{algorithm.upper()}: finish found ({len(self.result)} positions)"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        frame = self.frames[self.step]
        grid_lines = render_grid(frame, title=self.algorithm.upper())

        status = Text()
        status.append("Step: ", style="bold")
        status.append(f"{self.step} / {len(self.frames) - 1}\n")
        status.append("Visited: ", style="bold")
        status.append(f"{_count_visited(frame)}\n\n")

        status.append(Text.from_ansi("\n".join(grid_lines)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N - Next step\n")
        status.append("  P - Previous step\n")
        status.append("  E - Jump to end\n")
        status.append("  B - Re-run with BFS\n")
        status.append("  D - Re-run with DFS\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Maze Search Step-Through", border_style="green", width=80)

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'n' or key == readchar.key.RIGHT:
                        self.step = min(self.step + 1, len(self.frames) - 1)
                    elif key.lower() == 'p' or key == readchar.key.LEFT:
                        self.step = max(self.step - 1, 0)
                    elif key.lower() == 'e':
                        self.step = len(self.frames) - 1
                    elif key.lower() == 'b':
                        self.run_search("bfs")
                    elif key.lower() == 'd':
                        self.run_search("dfs")
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def _count_visited(frame: Snapshot) -> int:
    return sum(1 for row in frame for cell in row if isinstance(cell, Visited))


def main(grid_definition: str, algorithm: str) -> None:
    demo = InteractiveDemo(grid_definition, algorithm)
    demo.run()


if __name__ == "__main__":
    layout = sys.argv[1] if len(sys.argv) > 1 else 'classic'
    algorithm = sys.argv[2] if len(sys.argv) > 2 else 'bfs'
    main(LAYOUTS[layout], algorithm)
