import io
import random

import pytest

from aisearch.ids import iterative_deepening, main
from aisearch.puzzle import (
    GOAL,
    PuzzleError,
    PuzzleNode,
    blank_position,
    is_final_state,
)

ONE_MOVE = ((1, 2, 3), (4, 5, 6), (7, 0, 8))


def _scramble(seed, moves):
    rng = random.Random(seed)
    node = PuzzleNode(GOAL)
    for _ in range(moves):
        node = rng.choice(list(node.expand()))
    return node.tiles


def test_goal_found_at_level_zero():
    result = iterative_deepening(GOAL)
    assert result.level == 0
    assert result.steps == 0


def test_one_move():
    result = iterative_deepening(ONE_MOVE)
    assert result.level == 1
    assert [n.tiles for n in result.node.path()] == [ONE_MOVE, GOAL]


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_scrambled_boards(seed):
    start = _scramble(seed, 6)
    result = iterative_deepening(start)
    assert result.level <= 6
    path = result.node.path()
    assert path[0].tiles == start
    assert is_final_state(path[-1].tiles)
    for before, after in zip(path, path[1:]):
        (r1, c1), (r2, c2) = blank_position(before.tiles), blank_position(after.tiles)
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_steps_grow_with_depth():
    shallow = iterative_deepening(ONE_MOVE)
    deeper = iterative_deepening(((1, 2, 3), (0, 4, 6), (7, 5, 8)))
    assert deeper.steps > shallow.steps


def test_unsolvable_raises():
    with pytest.raises(PuzzleError):
        iterative_deepening(((2, 1, 3), (4, 5, 6), (7, 8, 0)))


def test_main_solves(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3\n4 5 6\n7 0 8\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "The solution is found!" in out
    assert "The solution is found at level 1." in out


def test_main_unsolvable(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 3 4 5 6 7 8 0"))
    assert main([]) == 0
    assert "The given  instance of puzzle is not solvable." in capsys.readouterr().out