"""
ASCII rendering for mazes and exploration trees.

Provides three views:
1. Token rows - the plain two-character-per-cell dump
2. Boxed grid - colourised cells inside a border
3. Tree outline - the exploration tree as an indented listing
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze_grid import Position
from maze_types import Empty, Finish, Marker, Snapshot, Start, Visited, Wall, marker_token

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 14


def render_tokens(snapshot: Snapshot, separator: bool = True) -> str:
    """
    Dump a grid as comma-separated token rows, one grid row per line.

    Example:
          ,XX,SP
        01,  ,FP
        --------------
    """
    lines = [",".join(marker_token(cell) for cell in row) for row in snapshot]
    if separator:
        lines.append(SEPARATOR)
    return "\n".join(lines)


def _marker_color(marker: Marker) -> Callable[[str], str]:
    match marker:
        case Wall():
            return chalk.blue
        case Start():
            return chalk.yellow.bold
        case Finish():
            return chalk.red.bold
        case Visited():
            return chalk.green
        case Empty():
            return lambda s: s
        case _:
            raise ValueError(f"Unknown marker: {marker}")


def render_grid(
    snapshot: Snapshot,
    title: str = "",
    highlight: tuple[int, int] | None = None,
    color: bool = True,
) -> list[str]:
    """
    Render a grid snapshot inside a box.

    Args:
        snapshot: Marker matrix to draw
        title: Optional title centred in the top border
        highlight: Optional (row, col) drawn with a white background
        color: Apply ANSI colours; disable for plain-text comparison

    Returns:
        List of strings representing the rendered lines
    """
    cols = len(snapshot[0]) if snapshot else 0
    cell_width = 3
    inner_width = cols * cell_width

    top = "─" * inner_width
    label = f" {title} " if title else ""
    if label and len(label) <= inner_width:
        start = (inner_width - len(label)) // 2
        top = "─" * start + label + "─" * (inner_width - start - len(label))
    lines = ["┌" + top + "┐"]

    for r, row in enumerate(snapshot):
        parts = ["│"]
        for c, cell in enumerate(row):
            content = marker_token(cell).center(cell_width)
            if not color:
                parts.append(content)
            elif highlight == (r, c):
                parts.append(chalk.bgWhite.black(content))
            else:
                parts.append(_marker_color(cell)(content))
        parts.append("│")
        lines.append("".join(parts))

    lines.append("└" + "─" * inner_width + "┘")
    return lines


def render_tree(root: Position, indent: str = "  ") -> str:
    """
    Render an exploration tree as an indented outline.

    Example:
        SP (3, 2)
          01 (2, 2)
            04 (1, 2)
          02 (4, 2)
    """
    lines: list[str] = []
    stack: list[tuple[Position, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(f"{indent * depth}{node.label} ({node.row}, {node.col})")
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines)


class StepRecorder:
    """
    Render collaborator that keeps every distinct grid state it is shown.

    Pass an instance as the `render` argument of a search; consecutive
    identical snapshots (a cell marked again with the same label) are folded.
    """

    def __init__(self, echo: Callable[[str], None] | None = None) -> None:
        self.frames: list[Snapshot] = []
        self.echo = echo

    def __call__(self, snapshot: Snapshot) -> None:
        if self.frames and self.frames[-1] == snapshot:
            return
        self.frames.append(snapshot)
        logger.debug("recorded frame %d", len(self.frames))
        if self.echo is not None:
            self.echo(render_tokens(snapshot))

    def __len__(self) -> int:
        return len(self.frames)
