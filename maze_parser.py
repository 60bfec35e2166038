"""
Maze parsing utilities.

Provides two input formats:
1. Concise format with one character per cell
2. Token rows with the two-character cell tokens used for printing
"""

from __future__ import annotations

from typing import Sequence

from maze_grid import Grid, Position
from maze_types import (
    EMPTY_TOKEN,
    FINISH_TOKEN,
    START_TOKEN,
    WALL_TOKEN,
    Empty,
    Finish,
    Marker,
    Start,
    Wall,
    marker_from_token,
)

__all__ = ["MazeFormatError", "find_endpoints", "parse_maze", "parse_token_rows"]


class MazeFormatError(ValueError):
    """A maze definition is malformed or lacks a unique start/finish."""


CONCISE_CELLS: dict[str, type[Marker]] = {
    "_": Empty,
    ".": Empty,
    "#": Wall,
    "S": Start,
    "F": Finish,
}


def parse_maze(definition: str) -> Grid:
    """
    Parse a maze from the concise single-character format.

    Format:
    - Rows separated by | or by newlines
    - Surrounding whitespace on each row is ignored
    - Cell characters:
      * '_' or '.': Empty cell
      * '#': Wall
      * 'S': Start
      * 'F': Finish

    Example:
        "_#_#_|#___#|_#___|__S##|_____|F_#_#"

        Creates the 6x5 maze with start at (3, 2) and finish at (5, 0).

    Args:
        definition: The maze string

    Returns:
        Grid with the parsed markers

    Raises:
        MazeFormatError: On unknown characters or ragged rows
    """
    row_strings = [row.strip() for row in definition.strip().replace("\n", "|").split("|")]
    row_strings = [row for row in row_strings if row]
    rows: list[list[Marker]] = []

    for row_idx, row_str in enumerate(row_strings):
        cells: list[Marker] = []
        for col_idx, char in enumerate(row_str):
            marker_type = CONCISE_CELLS.get(char)
            if marker_type is None:
                raise MazeFormatError(
                    f"Invalid character '{char}' in maze\n"
                    f"  Row {row_idx}, column {col_idx}: \"{row_str}\"\n"
                    f"  Valid characters: '_' or '.' (empty), '#' (wall), 'S' (start), 'F' (finish)"
                )
            cells.append(marker_type())
        rows.append(cells)

    _check_row_lengths(rows, row_strings)
    return Grid.from_markers(rows)


def parse_token_rows(rows: Sequence[Sequence[str]]) -> Grid:
    """
    Parse a maze given as rows of two-character tokens.

    Tokens: '  ' empty, 'XX' wall, 'SP' start, 'FP' finish; anything else is
    taken as the label of an already visited cell.
    """
    markers: list[list[Marker]] = []
    for row_idx, row in enumerate(rows):
        cells: list[Marker] = []
        for col_idx, token in enumerate(row):
            if len(token) < 2 or (len(token) != 2 and not token.isdigit()):
                raise MazeFormatError(
                    f"Invalid token {token!r} in maze\n"
                    f"  Row {row_idx}, column {col_idx}\n"
                    f"  Tokens are two characters: {EMPTY_TOKEN!r}, {WALL_TOKEN!r}, "
                    f"{START_TOKEN!r}, {FINISH_TOKEN!r} or a visited label"
                )
            try:
                cells.append(marker_from_token(token))
            except ValueError as e:
                raise MazeFormatError(f"{e}\n  Row {row_idx}, column {col_idx}") from e
        markers.append(cells)

    _check_row_lengths(markers, ["|".join(row) for row in rows])
    return Grid.from_markers(markers)


def find_endpoints(grid: Grid) -> tuple[Position, Position]:
    """
    Locate the unique start and finish cells.

    The search engine does not validate its input; callers that build mazes
    from literal definitions run this first.

    Returns:
        (start, finish) positions labeled with their tokens

    Raises:
        MazeFormatError: If start or finish is missing or duplicated
    """
    starts = list(grid.find(Start))
    finishes = list(grid.find(Finish))

    problems: list[str] = []
    for name, found in (("start", starts), ("finish", finishes)):
        if not found:
            problems.append(f"  No {name} cell")
        elif len(found) > 1:
            problems.append(f"  {len(found)} {name} cells at {', '.join(str(p) for p in found)}")
    if problems:
        raise MazeFormatError("Maze must have exactly one start and one finish\n" + "\n".join(problems))

    (start_row, start_col), (finish_row, finish_col) = starts[0], finishes[0]
    return (
        Position(start_row, start_col, label=START_TOKEN),
        Position(finish_row, finish_col, label=FINISH_TOKEN),
    )


def _check_row_lengths(rows: Sequence[Sequence[Marker]], row_strings: Sequence[str]) -> None:
    if not rows:
        raise MazeFormatError("Maze definition has no rows")
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in maze\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise MazeFormatError(error_msg)
