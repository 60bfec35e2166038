"""Tests for the interactive step-through driver (display only, no key loop)."""

from rich.panel import Panel

from demo import LAYOUTS
from interactive_demo import InteractiveDemo
from maze_search import ExplorationTree, NotFound
from maze_types import Finish, Visited


class TestInteractiveDemo:
    """Tests for recording and displaying frames."""

    def test_records_every_change(self) -> None:
        """Start and finish are pre-marked, so only labeled cells add frames."""
        demo = InteractiveDemo(LAYOUTS["classic"], "bfs")

        assert isinstance(demo.result, ExplorationTree)
        assert len(demo.frames) == len(demo.result) - 1
        assert demo.step == 0
        assert demo.frames[-1][5][0] == Finish()
        assert demo.frames[-1][5][1] == Visited("15")
        assert "BFS: finish found" in demo.status_message

    def test_switch_algorithm(self) -> None:
        demo = InteractiveDemo(LAYOUTS["classic"], "bfs")
        demo.step = 5
        demo.run_search("dfs")

        assert demo.algorithm == "dfs"
        assert demo.step == 0
        assert isinstance(demo.result, ExplorationTree)
        assert len(demo.frames) == len(demo.result) - 1

    def test_unreachable_layout(self) -> None:
        demo = InteractiveDemo(LAYOUTS["walled_in"], "dfs")

        assert isinstance(demo.result, NotFound)
        assert len(demo.frames) == 1
        assert "unreachable" in demo.status_message

    def test_display_panel(self) -> None:
        demo = InteractiveDemo(LAYOUTS["corridor"], "bfs")
        demo.step = len(demo.frames) - 1

        assert isinstance(demo.generate_display(), Panel)
