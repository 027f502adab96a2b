"""A* search over the 8-puzzle with a choice of heuristic."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from typing import Iterable, Optional, Sequence

from aisearch.puzzle import (
    Heuristic,
    PuzzleError,
    PuzzleNode,
    SearchResult,
    is_final_state,
    manhattan_distance,
    misplaced_tiles,
    parse_tiles,
    validate,
)

HEURISTICS: dict[str, Heuristic] = {
    "misplaced": misplaced_tiles,
    "manhattan": manhattan_distance,
}


def astar(
    tiles: Iterable[Sequence[int]], heuristic: Heuristic = misplaced_tiles
) -> SearchResult:
    """Expand boards in order of least g + h until the goal is reached."""
    root = PuzzleNode(validate(tiles), heuristic=heuristic)
    order = itertools.count()
    frontier = [(root.f, next(order), root)]
    steps = 0
    while frontier:
        _, _, node = heapq.heappop(frontier)
        if is_final_state(node.tiles):
            return SearchResult(node, steps)
        for child in node.expand():
            steps += 1
            heapq.heappush(frontier, (child.f, next(order), child))
    raise PuzzleError("search space exhausted without reaching the goal")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the 8-puzzle with A* search.")
    parser.add_argument(
        "--heuristic", choices=sorted(HEURISTICS), default="misplaced",
        help="heuristic used to rank boards",
    )
    args = parser.parse_args(argv)
    heuristic = HEURISTICS[args.heuristic]

    print("Enter initial state: Put 0 for blank state.")
    try:
        tiles = parse_tiles(sys.stdin.read())
    except PuzzleError as exc:
        print(exc)
        return 1
    try:
        tiles = validate(tiles)
    except PuzzleError as exc:
        print(exc)
        return 0

    print(f"hValue = {heuristic(tiles)}")
    print(astar(tiles, heuristic).report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())