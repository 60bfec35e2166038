"""
Breadth-first and depth-first maze exploration.

Both searches grow an exploration tree from the start position, label each
accepted position in discovery order, write that label onto the grid, and
stop as soon as the finish cell is discovered.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from maze_grid import Grid, Position
from maze_types import EMPTY_TOKEN, FINISH_TOKEN, START_TOKEN, WALL_TOKEN, Snapshot, format_label

logger = logging.getLogger(__name__)


# Render collaborator: called with a read-only snapshot after every mark
RenderFn = Callable[[Snapshot], None]


@dataclass(frozen=True)
class SearchRules:
    """Labeling rules shared by both searches."""

    start_label: str = START_TOKEN
    finish_label: str = FINISH_TOKEN
    label_width: int = 2

    def __post_init__(self) -> None:
        for name in ("start_label", "finish_label"):
            label = getattr(self, name)
            if not label.strip() or label in (EMPTY_TOKEN, WALL_TOKEN):
                raise ValueError(f"SearchRules.{name} must be a visible non-wall token, got {label!r}")
        if self.start_label == self.finish_label:
            raise ValueError(f"start and finish labels must differ, got {self.start_label!r} for both")
        if self.label_width < 1:
            raise ValueError(f"label_width must be positive, got {self.label_width}")


@dataclass(frozen=True)
class NotFound:
    """Search exhausted its frontier without discovering the finish."""

    explored: int  # Positions accepted into the tree before giving up

    def __bool__(self) -> bool:
        return False


# =============================================================================
# Exploration Tree
# =============================================================================


class ExplorationTree:
    """
    Arena owning every position accepted during one search.

    Children are owned top-down through Position.children. Position.parent is
    an integer slot into `nodes`, resolved with parent_of().
    """

    def __init__(self) -> None:
        self.nodes: list[Position] = []

    @property
    def root(self) -> Position:
        return self.nodes[0]

    def add(self, position: Position, parent: Position | None = None) -> Position:
        """Accept `position` into the arena and attach it under `parent`."""
        position.index = len(self.nodes)
        position.parent = parent.index if parent is not None else None
        self.nodes.append(position)
        if parent is not None:
            parent.add_child(position)
        return position

    def parent_of(self, position: Position) -> Position | None:
        if position.parent is None:
            return None
        return self.nodes[position.parent]

    def ancestry(self, position: Position) -> list[Position]:
        """`position` followed by each ancestor up to the root."""
        chain = [position]
        parent = self.parent_of(position)
        while parent is not None:
            chain.append(parent)
            parent = self.parent_of(parent)
        return chain

    def depth(self, position: Position) -> int:
        return len(self.ancestry(position)) - 1

    def find(self, row: int, col: int) -> Position | None:
        for node in self.nodes:
            if node.row == row and node.col == col:
                return node
        return None

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        if not self.nodes:
            return "ExplorationTree(empty)"
        return f"ExplorationTree(root={self.root!r}, nodes={len(self.nodes)})"


SearchResult = ExplorationTree | NotFound


def walk_tree(root: Position) -> Iterator[Position]:
    """Pre-order walk following children links."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def tree_signature(root: Position) -> tuple:
    """
    Structural fingerprint: (label, row, col, (child signatures...)).

    Position equality only compares coordinates; compare signatures to check
    that two trees have the same shape and labels.
    """
    signatures: dict[int, tuple] = {}
    for node in reversed(list(walk_tree(root))):
        signatures[id(node)] = (
            node.label,
            node.row,
            node.col,
            tuple(signatures[id(child)] for child in node.children),
        )
    return signatures[id(root)]


def replay(grid: Grid, root: Position) -> Grid:
    """Write every node of a tree onto `grid`, parents before children."""
    for node in walk_tree(root):
        grid.mark(node)
    return grid


# =============================================================================
# Search Context
# =============================================================================


class SearchContext:
    """Per-call state: grid, finish, label counter, arena and renderer."""

    def __init__(
        self,
        grid: Grid,
        finish: Position,
        rules: SearchRules,
        render: RenderFn | None = None,
    ) -> None:
        self.grid = grid
        self.finish = finish
        self.rules = rules
        self.render = render
        self.counter = 0
        self.tree = ExplorationTree()

    def next_label(self) -> str:
        self.counter += 1
        return format_label(self.counter, self.rules.label_width)

    def mark(self, position: Position) -> None:
        self.grid.mark(position)
        if self.render is not None:
            self.render(self.grid.snapshot())

    def plant_root(self, start: Position) -> Position:
        label = start.label if start.label.strip() and start.label != WALL_TOKEN else self.rules.start_label
        root = Position(start.row, start.col, label=label)
        return self.tree.add(root)

    def discover(self, current: Position) -> tuple[list[Position], bool]:
        """
        Accept every legal neighbour of `current` into the tree.

        Returns the newly labeled non-finish children and whether the finish
        was reached. Discovery stops at the finish.
        """
        accepted: list[Position] = []
        for child in self.grid.neighbors(current, goal=self.finish):
            if child == self.finish:
                child.label = self.rules.finish_label
                self.tree.add(child, current)
                self.mark(child)
                logger.debug("finish %s reached from %s", child.coords, current.coords)
                return accepted, True
            child.label = self.next_label()
            self.tree.add(child, current)
            self.mark(child)
            logger.debug("discovered %s at %s from %s", child.label, child.coords, current.coords)
            accepted.append(child)
        return accepted, False

    def not_found(self) -> NotFound:
        logger.info("search exhausted after %d positions; finish %s unreachable", len(self.tree), self.finish.coords)
        return NotFound(len(self.tree))


# =============================================================================
# Breadth-First Search
# =============================================================================


def bfs(
    grid: Grid,
    start: Position,
    finish: Position,
    render: RenderFn | None = None,
    rules: SearchRules = SearchRules(),
) -> SearchResult:
    """
    Explore `grid` breadth-first from `start` until `finish` is discovered.

    Args:
        grid: Maze to explore; visited cells are overwritten with labels
        start: Root position; its label is used if set, else rules.start_label
        finish: Target coordinates
        render: Optional callback receiving a grid snapshot after every mark
        rules: Label formatting rules

    Returns:
        The ExplorationTree (root = start) or NotFound
    """
    ctx = SearchContext(grid, finish, rules, render)
    root = ctx.plant_root(start)
    logger.info("bfs: %s -> %s on %r", root.coords, finish.coords, grid)

    frontier: deque[Position] = deque([root])
    while frontier:
        current = frontier.popleft()
        ctx.mark(current)
        children, found = ctx.discover(current)
        if found:
            logger.info("bfs: finish found after %d positions", len(ctx.tree))
            return ctx.tree
        frontier.extend(children)

    return ctx.not_found()


# =============================================================================
# Depth-First Search
# =============================================================================


def dfs(
    grid: Grid,
    start: Position,
    finish: Position,
    render: RenderFn | None = None,
    rules: SearchRules = SearchRules(),
    recursive: bool = False,
) -> SearchResult:
    """
    Explore `grid` depth-first from `start` until `finish` is discovered.

    Visiting a node labels all of its legal neighbours, then descends into
    each child in turn before moving on to that child's siblings.

    The default walk keeps an explicit stack, so depth is limited only by
    grid area. `recursive=True` performs the same walk with Python recursion,
    which hits the interpreter recursion limit on large open grids.
    """
    ctx = SearchContext(grid, finish, rules, render)
    root = ctx.plant_root(start)
    logger.info("dfs: %s -> %s on %r", root.coords, finish.coords, grid)
    ctx.mark(root)

    found = _descend_recursive(ctx, root) if recursive else _descend_iterative(ctx, root)
    if found:
        logger.info("dfs: finish found after %d positions", len(ctx.tree))
        return ctx.tree
    return ctx.not_found()


def _descend_recursive(ctx: SearchContext, node: Position) -> bool:
    children, found = ctx.discover(node)
    if found:
        return True
    for child in children:
        if _descend_recursive(ctx, child):
            return True
    return False


def _descend_iterative(ctx: SearchContext, root: Position) -> bool:
    children, found = ctx.discover(root)
    if found:
        return True

    stack: list[Iterator[Position]] = [iter(children)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        children, found = ctx.discover(node)
        if found:
            return True
        stack.append(iter(children))
    return False


# =============================================================================
# Solver Classes
# =============================================================================


class BFS:
    """Breadth-first exploration: FIFO frontier."""

    @staticmethod
    def solve(
        grid: Grid,
        start: Position,
        finish: Position,
        render: RenderFn | None = None,
        rules: SearchRules = SearchRules(),
    ) -> SearchResult:
        return bfs(grid, start, finish, render, rules)


class DFS:
    """Depth-first exploration: descend into each new child before its siblings."""

    @staticmethod
    def solve(
        grid: Grid,
        start: Position,
        finish: Position,
        render: RenderFn | None = None,
        rules: SearchRules = SearchRules(),
    ) -> SearchResult:
        return dfs(grid, start, finish, render, rules)


SOLVERS: dict[str, Callable[..., SearchResult]] = {
    "bfs": BFS.solve,
    "dfs": DFS.solve,
}
