"""Graph colouring as a constraint satisfaction problem with forward checking."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

Adjacency = list[list[int]]


def generate_random_graph(
    vertices: int,
    edges: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Adjacency:
    """Build a symmetric 0/1 adjacency matrix holding ``edges`` distinct random edges.

    By default the number of edges is ``vertices * (vertices - 1) // 2``.
    """
    if vertices < 0:
        raise ValueError("the number of vertices cannot be negative")
    most = vertices * (vertices - 1) // 2
    if edges is None:
        edges = most
    if edges < 0:
        raise ValueError("the number of edges cannot be negative")
    if edges > most:
        raise ValueError(
            f"a graph with {vertices} vertices has at most {most} edges, not {edges}"
        )
    rng = rng or random.Random()

    chosen: set[frozenset[int]] = set()
    while len(chosen) < edges:
        a = rng.randrange(vertices)
        b = rng.randrange(vertices)
        if a != b:
            chosen.add(frozenset((a, b)))

    matrix = [[0] * vertices for _ in range(vertices)]
    for a, b in (tuple(edge) for edge in chosen):
        matrix[a][b] = 1
        matrix[b][a] = 1
    return matrix


def _neighbours(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("the adjacency matrix must be square")
    return [[j for j, linked in enumerate(row) if linked] for row in adjacency]


def color_graph(
    adjacency: Sequence[Sequence[int]], colors: int
) -> Optional[list[int]]:
    """Colour the graph with colours 1..``colors`` so that no edge joins equal colours.

    Vertices are taken most-constrained first (smallest remaining domain, ties
    broken by highest degree). Returns the colour of each vertex, or None when
    no colouring exists.
    """
    neighbours = _neighbours(adjacency)
    size = len(neighbours)
    assignment = [0] * size
    start_domains = [list(range(1, colors + 1)) for _ in range(size)]
    start_order = sorted(range(size), key=lambda v: len(neighbours[v]), reverse=True)

    def consistent(vertex: int, value: int, domains: list[list[int]]) -> bool:
        # Refuse a value that would leave an uncoloured neighbour with no choice.
        return not any(
            assignment[other] == 0 and domains[other] == [value]
            for other in neighbours[vertex]
        )

    def solve(order: list[int], domains: list[list[int]], remaining: int) -> bool:
        if remaining == 0:
            return True
        vertex = next(v for v in order if assignment[v] == 0)
        for value in domains[vertex]:
            if not consistent(vertex, value, domains):
                continue
            assignment[vertex] = value
            pruned = [list(domain) for domain in domains]
            for other in neighbours[vertex]:
                if value in pruned[other]:
                    pruned[other].remove(value)
            next_order = sorted(order, key=lambda v: len(pruned[v]))
            if solve(next_order, pruned, remaining - 1):
                return True
            assignment[vertex] = 0
        return False

    if solve(start_order, start_domains, size):
        return assignment
    return None


def _read_ints(count: int) -> list[int]:
    tokens = sys.stdin.read().split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} integers, got {len(tokens)}")
    return [int(token) for token in tokens[:count]]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Colour a random complete graph by constraint satisfaction."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    print("Random graph generation: ")
    print("Enter number of vertex")
    print(" Enter number of colors")
    try:
        vertices, colors = _read_ints(2)
        graph = generate_random_graph(vertices, rng=random.Random(args.seed))
    except ValueError as exc:
        print(exc)
        return 1

    print("\nThe generated random graph is: ")
    for row in graph:
        print("".join(f"{value} " for value in row))

    solution = color_graph(graph, colors)
    if solution is None:
        print("Solution does not exist!")
    else:
        shown = "".join(f"{value} " for value in solution)
        print(f"Graph colored . Possible solution can be: {shown}")
    return 0


if __name__ == "__main__":
    sys.exit(main())