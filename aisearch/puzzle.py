"""The 8-puzzle: board helpers, heuristics and search-tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Sequence

SIZE = 3
GOAL: tuple[tuple[int, ...], ...] = ((1, 2, 3), (4, 5, 6), (7, 8, 0))
SEPARATOR = "-" * 27

Tiles = tuple[tuple[int, ...], ...]
Heuristic = Callable[[Tiles], int]

# Order in which the blank is moved: up, left, down, right.
_MOVES = ((-1, 0), (0, -1), (1, 0), (0, 1))


class PuzzleError(ValueError):
    """Raised for a board that cannot be searched."""


def _as_grid(tiles: Iterable[Sequence[int]]) -> Tiles:
    try:
        grid = tuple(tuple(int(value) for value in row) for row in tiles)
    except (TypeError, ValueError) as exc:
        raise PuzzleError("tiles must be a 3x3 grid of integers") from exc
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise PuzzleError("tiles must be a 3x3 grid of integers")
    return grid


def _flat(tiles: Iterable[Sequence[int]]) -> list[int]:
    return [value for row in _as_grid(tiles) for value in row]


def _cells(grid: Tiles) -> Iterator[tuple[int, int, int]]:
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            yield r, c, value


def misplaced_tiles(tiles: Iterable[Sequence[int]]) -> int:
    """Count the first eight cells that do not hold their goal value."""
    grid = _as_grid(tiles)
    return sum(
        1
        for r, c, value in _cells(grid)
        if (r, c) != (SIZE - 1, SIZE - 1) and value != r * SIZE + c + 1
    )


def manhattan_distance(tiles: Iterable[Sequence[int]]) -> int:
    """Sum of the distances of every numbered tile from its goal cell."""
    grid = _as_grid(tiles)
    total = 0
    for r, c, value in _cells(grid):
        if value == 0:
            continue
        goal_r, goal_c = divmod(value - 1, SIZE)
        total += abs(goal_r - r) + abs(goal_c - c)
    return total


def is_solvable(tiles: Iterable[Sequence[int]]) -> bool:
    """True when the number of inversions among numbered tiles is even."""
    values = [value for value in _flat(tiles) if value != 0]
    inversions = sum(
        1
        for i, left in enumerate(values)
        for right in values[i + 1:]
        if left > right
    )
    return inversions % 2 == 0


def all_unique(tiles: Iterable[Sequence[int]]) -> bool:
    """True when the board holds each of 0..8 exactly once."""
    return sorted(_flat(tiles)) == list(range(SIZE * SIZE))


def is_final_state(tiles: Iterable[Sequence[int]]) -> bool:
    """True when the first eight cells read 1 to 8 in order."""
    return _flat(tiles)[: SIZE * SIZE - 1] == list(range(1, SIZE * SIZE))


def blank_position(tiles: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Row and column of the blank (0) tile."""
    for r, c, value in _cells(_as_grid(tiles)):
        if value == 0:
            return r, c
    raise PuzzleError("the board has no blank tile")


def format_tiles(tiles: Iterable[Sequence[int]]) -> str:
    """Render a board between two separator lines."""
    lines = [SEPARATOR]
    lines.extend("".join(f"{value}\t" for value in row) for row in _as_grid(tiles))
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def parse_tiles(text: str) -> Tiles:
    """Read nine whitespace-separated integers, row by row."""
    tokens = text.split()
    if len(tokens) < SIZE * SIZE:
        raise PuzzleError(f"expected {SIZE * SIZE} tile values, got {len(tokens)}")
    try:
        values = [int(token) for token in tokens[: SIZE * SIZE]]
    except ValueError as exc:
        raise PuzzleError("tile values must be integers") from exc
    return tuple(tuple(values[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))


def validate(tiles: Iterable[Sequence[int]]) -> Tiles:
    """Return the board as a grid, or raise if it cannot be solved."""
    grid = _as_grid(tiles)
    if not all_unique(grid):
        raise PuzzleError("All the values in tile must be unique.")
    if not is_solvable(grid):
        raise PuzzleError("The given  instance of puzzle is not solvable.")
    return grid


@dataclass(eq=False)
class PuzzleNode:
    """A board in the search tree, with its cost values."""

    tiles: Tiles
    parent: Optional["PuzzleNode"] = None
    level: int = 0
    g: int = 0
    heuristic: Optional[Heuristic] = field(default=None, repr=False)
    h: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.tiles = _as_grid(self.tiles)
        self.h = self.heuristic(self.tiles) if self.heuristic else 0

    @property
    def f(self) -> int:
        return self.g + self.h

    def expand(self) -> Iterator["PuzzleNode"]:
        """Yield the boards reached by moving the blank up, left, down, right."""
        r, c = blank_position(self.tiles)
        for dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < SIZE and 0 <= nc < SIZE):
                continue
            rows = [list(row) for row in self.tiles]
            rows[r][c], rows[nr][nc] = rows[nr][nc], rows[r][c]
            yield PuzzleNode(
                tiles=tuple(tuple(row) for row in rows),
                parent=self,
                level=self.level + 1,
                g=self.g + 1,
                heuristic=self.heuristic,
            )

    def path(self) -> list["PuzzleNode"]:
        """Nodes from the root down to this one."""
        nodes: list[PuzzleNode] = []
        node: Optional[PuzzleNode] = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes


@dataclass
class SearchResult:
    """The goal node a search reached and the number of nodes it generated."""

    node: PuzzleNode
    steps: int

    @property
    def level(self) -> int:
        return self.node.level

    def report(self) -> str:
        parts = [
            "The solution is found!\n",
            "The solution path is as follows.\n",
        ]
        parts.extend(format_tiles(node.tiles) for node in self.node.path())
        parts.append(f"The solution is found at level {self.level}.\n")
        parts.append(f"The total number of steps required are {self.steps}.\n")
        return "".join(parts)