"""Tests for maze_parser module."""

import pytest

from maze_parser import MazeFormatError, find_endpoints, parse_maze, parse_token_rows
from maze_types import Empty, Finish, Start, Visited, Wall


class TestParseMaze:
    """Tests for the concise maze parser."""

    def test_simple_maze(self) -> None:
        """Parse a small maze with every cell type."""
        grid = parse_maze("S#|.F|__")

        assert grid.row_count == 3
        assert grid.col_count == 2
        assert isinstance(grid.get(0, 0), Start)
        assert isinstance(grid.get(0, 1), Wall)
        assert isinstance(grid.get(1, 0), Empty)
        assert isinstance(grid.get(1, 1), Finish)
        assert isinstance(grid.get(2, 0), Empty)

    def test_multiline(self) -> None:
        """Newlines separate rows just like |."""
        definition = """
        _#_#_
        #___#
        _#___
        __S##
        _____
        F_#_#
        """
        grid = parse_maze(definition)

        assert grid.tokens() == parse_maze("_#_#_|#___#|_#___|__S##|_____|F_#_#").tokens()
        assert grid.row_count == 6
        assert grid.col_count == 5

    def test_invalid_character(self) -> None:
        with pytest.raises(MazeFormatError, match="Invalid character 'x'"):
            parse_maze("S_|_x|F_")

    def test_ragged_rows(self) -> None:
        with pytest.raises(MazeFormatError, match="Inconsistent row lengths"):
            parse_maze("S__|_F")

    def test_empty_definition(self) -> None:
        with pytest.raises(MazeFormatError, match="no rows"):
            parse_maze("   ")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_maze("S?F")


class TestParseTokenRows:
    """Tests for the two-character token parser."""

    def test_tokens(self) -> None:
        grid = parse_token_rows([["SP", "XX"], ["07", "FP"], ["  ", "  "]])

        assert grid.get(0, 0) == Start()
        assert grid.get(0, 1) == Wall()
        assert grid.get(1, 0) == Visited("07")
        assert grid.get(1, 1) == Finish()
        assert grid.get(2, 1) == Empty()

    def test_three_digit_label(self) -> None:
        grid = parse_token_rows([["100", "SP"]])
        assert grid.get(0, 0) == Visited("100")

    def test_bad_token_width(self) -> None:
        with pytest.raises(MazeFormatError, match="Row 0, column 1"):
            parse_token_rows([["SP", "X"]])

    @pytest.mark.parametrize("token", ["1", "", "X"])
    def test_short_tokens_rejected(self, token: str) -> None:
        """Single characters are not labels, digits included."""
        with pytest.raises(MazeFormatError, match="Invalid token"):
            parse_token_rows([["SP", token]])

    def test_blank_token(self) -> None:
        """Two characters of whitespace other than two spaces is rejected."""
        with pytest.raises(MazeFormatError):
            parse_token_rows([["SP", " \t"]])


class TestFindEndpoints:
    """Tests for start/finish validation."""

    def test_finds_both(self) -> None:
        grid = parse_maze("_#_#_|#___#|_#___|__S##|_____|F_#_#")
        start, finish = find_endpoints(grid)

        assert start.coords == (3, 2)
        assert start.label == "SP"
        assert finish.coords == (5, 0)
        assert finish.label == "FP"

    def test_missing_start(self) -> None:
        with pytest.raises(MazeFormatError, match="No start cell"):
            find_endpoints(parse_maze("__|_F"))

    def test_missing_finish(self) -> None:
        with pytest.raises(MazeFormatError, match="No finish cell"):
            find_endpoints(parse_maze("S_|__"))

    def test_duplicate_finish(self) -> None:
        with pytest.raises(MazeFormatError, match="2 finish cells"):
            find_endpoints(parse_maze("SF|_F"))

    def test_reports_all_problems(self) -> None:
        with pytest.raises(MazeFormatError) as excinfo:
            find_endpoints(parse_maze("SS|__"))
        message = str(excinfo.value)
        assert "2 start cells" in message
        assert "No finish cell" in message
