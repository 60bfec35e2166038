"""
Grid model for maze search: positions, move legality and cell marking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from maze_types import (
    CLOCKWISE,
    Direction,
    Empty,
    Finish,
    Marker,
    Snapshot,
    WALL_TOKEN,
    marker_from_token,
    marker_token,
)

logger = logging.getLogger(__name__)


class Position:
    """
    A cell coordinate plus the links that place it in an exploration tree.

    `row` and `col` are read-only. `parent` is the arena slot of the parent
    node inside an ExplorationTree (None for the root or a detached probe),
    `index` is this node's own slot once it has been accepted.

    Equality and hashing look at (row, col) only, so a fresh probe compares
    equal to the finish coordinates regardless of label or links. Use
    maze_search.tree_signature() to compare whole trees structurally.
    """

    __slots__ = ("_row", "_col", "parent", "label", "children", "index")

    def __init__(self, row: int, col: int, parent: int | None = None, label: str = "") -> None:
        self._row = row
        self._col = col
        self.parent = parent
        self.label = label
        self.children: list[Position] = []
        self.index: int | None = None

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coords(self) -> tuple[int, int]:
        return (self._row, self._col)

    def step(self, direction: Direction) -> Position:
        """New detached position one cell away, with this node as parent."""
        dr, dc = direction.delta
        return Position(self._row + dr, self._col + dc, parent=self.index)

    def add_child(self, child: Position) -> None:
        self.children.append(child)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._row == other._row and self._col == other._col

    def __hash__(self) -> int:
        return hash((self._row, self._col))

    def __repr__(self) -> str:
        return f"Position({self._row}, {self._col}, label={self.label!r})"


class Grid:
    """A fixed-size matrix of cell markers."""

    def __init__(self, row_count: int, col_count: int) -> None:
        if row_count < 0 or col_count < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {row_count}x{col_count}")
        self.row_count = row_count
        self.col_count = col_count
        self.cells: list[list[Marker]] = [[Empty() for _ in range(col_count)] for _ in range(row_count)]

    @classmethod
    def from_markers(cls, rows: Sequence[Sequence[Marker]]) -> Grid:
        """Build a grid from a pre-populated marker matrix."""
        row_count = len(rows)
        col_count = len(rows[0]) if rows else 0
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != col_count]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {col_count} columns (from row 0)\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
            raise ValueError(error_msg)

        grid = cls(row_count, col_count)
        grid.cells = [list(row) for row in rows]
        return grid

    @classmethod
    def from_tokens(cls, rows: Iterable[Iterable[str]]) -> Grid:
        """Build a grid from rows of two-character tokens ("XX", "SP", "  ", ...)."""
        return cls.from_markers([[marker_from_token(token) for token in row] for row in rows])

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.row_count and 0 <= col < self.col_count

    def get(self, row: int, col: int) -> Marker:
        return self.cells[row][col]

    def is_legal_move(self, source: Position, direction: Direction) -> bool:
        """
        True iff stepping from `source` in `direction` stays inside the grid
        and lands on an Empty cell. Walls, start, finish and visited cells are
        never legal re-entries.
        """
        dr, dc = direction.delta
        row, col = source.row + dr, source.col + dc
        return self.in_bounds(row, col) and isinstance(self.cells[row][col], Empty)

    def neighbors(self, source: Position, goal: Position | None = None) -> list[Position]:
        """
        Legal one-step moves from `source`, in the order up, right, down, left.

        Returned positions are new, unlabeled, and carry `source` as parent.
        If `goal` is given, its cell is also accepted when pre-marked Finish,
        so a maze with a pre-marked finish cell can still be solved.
        """
        result: list[Position] = []
        for direction in CLOCKWISE:
            candidate = source.step(direction)
            if self.is_legal_move(source, direction):
                result.append(candidate)
            elif (
                goal is not None
                and candidate == goal
                and self.in_bounds(candidate.row, candidate.col)
                and isinstance(self.cells[candidate.row][candidate.col], Finish)
            ):
                result.append(candidate)
        return result

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def mark(self, position: Position) -> bool:
        """
        Write `position.label` into its cell.

        Out-of-range coordinates and unlabeled positions are ignored, and a
        label can never turn a cell back into Empty or into a Wall. Returns
        True if the cell changed.
        """
        if not self.in_bounds(position.row, position.col):
            logger.debug("mark: ignoring out-of-range %r", position)
            return False
        if not position.label.strip() or position.label == WALL_TOKEN:
            logger.debug("mark: ignoring %r, label is not a visit marker", position)
            return False
        marker = marker_from_token(position.label)
        if self.cells[position.row][position.col] == marker:
            return False
        self.cells[position.row][position.col] = marker
        return True

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Immutable copy of the current marker matrix."""
        return tuple(tuple(row) for row in self.cells)

    def tokens(self) -> list[list[str]]:
        return [[marker_token(cell) for cell in row] for row in self.cells]

    def find(self, marker_type: type) -> Iterator[tuple[int, int]]:
        """Yield (row, col) of every cell holding a marker of `marker_type`."""
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if isinstance(cell, marker_type):
                    yield (r, c)

    def copy(self) -> Grid:
        return Grid.from_markers(self.cells)

    def __repr__(self) -> str:
        return f"Grid({self.row_count}x{self.col_count})"
