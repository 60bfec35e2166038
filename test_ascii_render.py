"""Tests for ascii_render module."""

from ascii_render import SEPARATOR, StepRecorder, render_grid, render_tokens, render_tree
from maze_grid import Grid, Position
from maze_parser import find_endpoints, parse_maze
from maze_search import ExplorationTree, bfs


class TestRenderTokens:
    """Tests for the plain token dump."""

    def test_rows_and_separator(self) -> None:
        grid = Grid.from_tokens([["  ", "XX"], ["01", "FP"]])
        output = render_tokens(grid.snapshot())

        assert output == "  ,XX\n01,FP\n" + SEPARATOR

    def test_without_separator(self) -> None:
        grid = Grid.from_tokens([["SP", "  "]])
        assert render_tokens(grid.snapshot(), separator=False) == "SP,  "


class TestRenderGrid:
    """Tests for the boxed grid view."""

    def test_plain_layout(self) -> None:
        grid = parse_maze("S#_|__F")
        lines = render_grid(grid.snapshot(), color=False)

        assert len(lines) == 4
        assert lines[0].startswith("┌") and lines[0].endswith("┐")
        assert lines[-1].startswith("└") and lines[-1].endswith("┘")
        assert all(len(line) == 2 + 3 * 3 for line in lines)
        assert "SP" in lines[1] and "XX" in lines[1]
        assert "FP" in lines[2]

    def test_title_in_border(self) -> None:
        grid = Grid(2, 4)
        lines = render_grid(grid.snapshot(), title="BFS", color=False)
        assert " BFS " in lines[0]
        assert len(lines[0]) == 2 + 3 * 4

    def test_title_too_long_is_dropped(self) -> None:
        grid = Grid(1, 1)
        lines = render_grid(grid.snapshot(), title="a long title", color=False)
        assert lines[0] == "┌───┐"

    def test_colored_output_keeps_tokens(self) -> None:
        grid = parse_maze("S#|_F")
        lines = render_grid(grid.snapshot(), highlight=(1, 0))
        joined = "\n".join(lines)
        for token in ("SP", "XX", "FP"):
            assert token in joined


class TestRenderTree:
    """Tests for the tree outline."""

    def test_outline(self) -> None:
        grid = parse_maze("_S_|_#F")
        start, finish = find_endpoints(grid)
        result = bfs(grid, start, finish)
        assert isinstance(result, ExplorationTree)

        assert render_tree(result.root) == "\n".join(
            [
                "SP (0, 1)",
                "  01 (0, 2)",
                "    FP (1, 2)",
                "  02 (0, 0)",
            ]
        )


class TestStepRecorder:
    """Tests for the frame recorder."""

    def test_folds_repeated_frames(self) -> None:
        grid = Grid(1, 2)
        recorder = StepRecorder()
        recorder(grid.snapshot())
        recorder(grid.snapshot())
        grid.mark(Position(0, 0, label="SP"))
        recorder(grid.snapshot())

        assert len(recorder) == 2

    def test_echo(self) -> None:
        printed: list[str] = []
        recorder = StepRecorder(echo=printed.append)
        grid = Grid(1, 1)
        recorder(grid.snapshot())

        assert printed == ["  \n" + SEPARATOR]
