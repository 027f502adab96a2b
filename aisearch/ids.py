"""Iterative deepening depth-first search over the 8-puzzle."""

from __future__ import annotations

import argparse
import itertools
import sys
from typing import Iterable, Optional, Sequence

from aisearch.puzzle import (
    PuzzleError,
    PuzzleNode,
    SearchResult,
    is_final_state,
    parse_tiles,
    validate,
)


def iterative_deepening(tiles: Iterable[Sequence[int]]) -> SearchResult:
    """Run depth-limited searches with limits 0, 1, 2, ... until the goal is found."""
    root = PuzzleNode(validate(tiles))
    steps = 0
    for limit in itertools.count():
        stack = [root]
        while stack:
            node = stack.pop()
            if is_final_state(node.tiles):
                return SearchResult(node, steps)
            if node.level < limit:
                for child in node.expand():
                    steps += 1
                    stack.append(child)
    raise PuzzleError("search ended without reaching the goal")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Solve the 8-puzzle with iterative deepening search."
    )
    parser.parse_args(argv)

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

    print(iterative_deepening(tiles).report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())