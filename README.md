# aisearch

A small collection of classic AI search algorithms, with no dependencies
beyond the standard library:

- `aisearch.puzzle`: 8-puzzle boards, the misplaced-tiles and
  Manhattan-distance heuristics, solvability checks and search-tree nodes.
- `aisearch.astar`: A* search over the 8-puzzle.
- `aisearch.ids`: iterative deepening depth-first search over the 8-puzzle.
- `aisearch.coloring`: graph colouring as a constraint satisfaction problem,
  using degree ordering, minimum-remaining-values selection and forward
  checking, on a randomly generated graph.
- `aisearch.nqueen`: a genetic algorithm for the N-queens problem.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

Each command reads its input from standard input.

```
aisearch-astar [--heuristic {manhattan,misplaced}]
aisearch-ids
aisearch-coloring [--seed SEED]
aisearch-nqueen [--queens N] [--seed SEED] [--generations G] [--rounds R]
```

**aisearch-astar** and **aisearch-ids** read nine integers, row by row, with
0 for the blank. For an input such as `1 2 3 4 5 6 7 0 8` they print the
solution path board by board, the level at which the goal was found and the
number of nodes generated. `aisearch-astar` also prints the heuristic value of
the starting board; its heuristic is `misplaced` unless `--heuristic manhattan`
is given. A board that does not hold each of 0 to 8 exactly once, or whose
number of inversions is odd, is reported and not searched. Fewer than nine
values, or values that are not integers, end the command with status 1.

**aisearch-coloring** reads the number of vertices and then the number of
colours. It generates a random complete graph on that many vertices (every
pair of vertices joined), prints its adjacency matrix, and prints either a
colour (1 to the number of colours) for each vertex or
`Solution does not exist!`. `--seed` makes the graph reproducible.

**aisearch-nqueen** needs no input. It runs `--rounds` rounds (default 3) with
populations of 10, 100, 1000, ... new chromosomes, added to those of earlier
rounds, and prints each population size followed by either the correct
solution or the best arrangement found. The board size is set by `--queens`
(1 to 9, default 8), the random seed by `--seed` (default 2), and the number
of generations per round by `--generations` (default 1,000,000). An
arrangement is a string of digits in which position `i` holds the row of the
queen in column `i`.

## Library use

```python
from aisearch.puzzle import parse_tiles, validate, manhattan_distance
from aisearch.astar import astar
from aisearch.ids import iterative_deepening

tiles = parse_tiles("1 2 3 4 5 6 0 7 8")
validate(tiles)                      # raises PuzzleError if invalid or unsolvable
result = astar(tiles, manhattan_distance)
print(result.level, result.steps)
print(result.report())

result = iterative_deepening(tiles)
for node in result.node.path():
    print(node.tiles)
```

`astar` and `iterative_deepening` validate the board themselves and raise
`PuzzleError` (a subclass of `ValueError`) for one that cannot be searched.
`astar` uses `misplaced_tiles` when no heuristic is given; any function from a
3x3 grid to an integer may be passed instead.

Graph colouring and N-queens:

```python
import random
from aisearch.coloring import generate_random_graph, color_graph
from aisearch.nqueen import generate_population, genetic_algorithm, is_solution

rng = random.Random(2)
adjacency = generate_random_graph(5, 10, rng)
print(color_graph(adjacency, 3))     # a list of colours, or None if none exists

population = generate_population(10, 8, rng)
best = genetic_algorithm(population, 10, 8, rng, 1000)
print(best.arrangement, best.cost, is_solution(best, 8))
```

`generate_random_graph` raises `ValueError` when asked for more edges than the
vertices allow; `color_graph` accepts any square 0/1 adjacency matrix.