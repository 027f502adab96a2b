"""A genetic algorithm for the N-queens problem."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_GENERATIONS = 1_000_000


def _digit(value: int) -> str:
    return chr(ord("0") + value)


def fitness(arrangement: str, n: int = 8) -> int:
    """Number of queen pairs that do not attack each other.

    Position ``i`` of the arrangement holds the row of the queen in column ``i``.
    """
    rows = [ord(ch) for ch in arrangement[:n]]
    score = n * (n - 1) // 2
    for i, a in enumerate(rows):
        for j in range(i + 1, len(rows)):
            b = rows[j]
            if a == b or i - a == j - b or i + a == j + b:
                score -= 1
    return score


@dataclass(frozen=True)
class Chromosome:
    """A queen arrangement and its fitness."""

    arrangement: str
    cost: int

    @classmethod
    def of(cls, arrangement: str, n: int = 8) -> "Chromosome":
        return cls(arrangement, fitness(arrangement, n))


def generate_population(
    size: int, n: int = 8, rng: Optional[random.Random] = None
) -> list[Chromosome]:
    """Create ``size`` chromosomes by repeatedly shuffling the digits 1..n."""
    rng = rng or random.Random()
    sample = [_digit(i) for i in range(1, n + 1)]
    population = []
    for _ in range(size):
        rng.shuffle(sample)
        population.append(Chromosome.of("".join(sample), n))
    return population


def reproduce(
    x: Chromosome, y: Chromosome, n: int = 8, rng: Optional[random.Random] = None
) -> Chromosome:
    """Single-point crossover: a prefix of ``x`` followed by the rest of ``y``."""
    rng = rng or random.Random()
    cut = rng.randrange(n)
    return Chromosome.of(x.arrangement[:cut] + y.arrangement[cut:], n)


def mutate(
    chromosome: Chromosome, n: int = 8, rng: Optional[random.Random] = None
) -> Chromosome:
    """Put a random row (1..n) at one random position."""
    rng = rng or random.Random()
    position = rng.randrange(n)
    row = rng.randrange(n) + 1
    text = chromosome.arrangement
    return Chromosome.of(text[:position] + _digit(row) + text[position + 1:], n)


def is_solution(chromosome: Chromosome, n: int = 8) -> bool:
    """True when no two queens attack each other."""
    return chromosome.cost == n * (n - 1) // 2


def _by_cost(population: list[Chromosome]) -> list[Chromosome]:
    return sorted(population, key=lambda c: c.cost, reverse=True)


def genetic_algorithm(
    population: Sequence[Chromosome],
    size: int,
    n: int = 8,
    rng: Optional[random.Random] = None,
    generations: int = DEFAULT_GENERATIONS,
) -> Chromosome:
    """Breed ``size`` children per generation from the two fittest parents.

    Children accumulate across generations. Returns the first child that is a
    solution, or the fittest chromosome once the generations run out.
    """
    if not population:
        raise ValueError("the population is empty")
    rng = rng or random.Random()
    current = list(population)
    offspring: list[Chromosome] = []
    for _ in range(generations):
        current = _by_cost(current)
        for _ in range(size):
            first = current[rng.randrange(len(current)) % 2]
            second = current[rng.randrange(len(current)) % 2]
            child = reproduce(first, second, n, rng)
            if rng.randrange(2) == 0:
                child = mutate(child, n, rng)
            if is_solution(child, n):
                return child
            offspring.append(child)
        if offspring:
            current = list(offspring)
    return _by_cost(current)[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Search for an N-queens arrangement with a genetic algorithm."
    )
    parser.add_argument("--queens", type=int, default=8, help="board size (1-9)")
    parser.add_argument("--seed", type=int, default=2, help="random seed")
    parser.add_argument(
        "--generations", type=int, default=DEFAULT_GENERATIONS,
        help="generations per round",
    )
    parser.add_argument(
        "--rounds", type=int, default=3,
        help="rounds with populations of 10, 100, 1000, ...",
    )
    args = parser.parse_args(argv)
    if not 1 <= args.queens <= 9:
        parser.error("--queens must be between 1 and 9")

    rng = random.Random(args.seed)
    population: list[Chromosome] = []
    for round_number in range(args.rounds):
        size = 10 ** (round_number + 1)
        print(size)
        population.extend(generate_population(size, args.queens, rng))
        answer = genetic_algorithm(
            population, size, args.queens, rng, args.generations
        )
        if is_solution(answer, args.queens):
            print(f"The correct solution is {answer.arrangement}")
        else:
            print(f"The best solution found is {answer.arrangement}")
    return 0


if __name__ == "__main__":
    sys.exit(main())