"""
Shared type definitions for the maze search system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction for a single move."""

    N = "N"  # Up (decreasing row)
    E = "E"  # Right (increasing col)
    S = "S"  # Down (increasing row)
    W = "W"  # Left (decreasing col)

    @property
    def delta(self) -> tuple[int, int]:
        """(row_delta, col_delta) for one step in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.E: (0, 1),
    Direction.S: (1, 0),
    Direction.W: (0, -1),
}

# Neighbour generation order: up, right, down, left
CLOCKWISE: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)


# =============================================================================
# Cell Markers
# =============================================================================

EMPTY_TOKEN = "  "
WALL_TOKEN = "XX"
START_TOKEN = "SP"
FINISH_TOKEN = "FP"


@dataclass(frozen=True)
class Empty:
    """An open cell nobody has visited yet."""

    pass


@dataclass(frozen=True)
class Wall:
    """A blocked cell."""

    pass


@dataclass(frozen=True)
class Start:
    """The start cell."""

    pass


@dataclass(frozen=True)
class Finish:
    """The finish cell."""

    pass


@dataclass(frozen=True)
class Visited:
    """A cell accepted into the exploration tree, showing its label."""

    label: str


Marker = Empty | Wall | Start | Finish | Visited

Snapshot = tuple[tuple[Marker, ...], ...]


def marker_token(marker: Marker) -> str:
    """Two-character token used when printing a cell."""
    match marker:
        case Empty():
            return EMPTY_TOKEN
        case Wall():
            return WALL_TOKEN
        case Start():
            return START_TOKEN
        case Finish():
            return FINISH_TOKEN
        case Visited(label=label):
            return label
        case _:
            raise ValueError(f"Unknown marker: {marker}")


def marker_from_token(token: str) -> Marker:
    """Inverse of marker_token. Any unreserved token is a visited label."""
    if token == EMPTY_TOKEN:
        return Empty()
    if token == WALL_TOKEN:
        return Wall()
    if token == START_TOKEN:
        return Start()
    if token == FINISH_TOKEN:
        return Finish()
    if not token.strip():
        raise ValueError(f"Blank token {token!r} is not a valid cell; empty cells are {EMPTY_TOKEN!r}")
    return Visited(token)


def format_label(number: int, width: int = 2) -> str:
    """Zero-pad a discovery number. Numbers wider than `width` are left as-is."""
    return str(number).zfill(width)
