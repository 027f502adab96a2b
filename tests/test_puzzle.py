import pytest

from aisearch.puzzle import (
    GOAL,
    PuzzleError,
    PuzzleNode,
    SearchResult,
    all_unique,
    blank_position,
    format_tiles,
    is_final_state,
    is_solvable,
    manhattan_distance,
    misplaced_tiles,
    parse_tiles,
    validate,
)

CENTER_BLANK = ((1, 2, 3), (4, 0, 5), (7, 8, 6))
ONE_MOVE = ((1, 2, 3), (4, 5, 6), (7, 0, 8))


def test_goal_has_zero_heuristics():
    assert misplaced_tiles(GOAL) == 0
    assert manhattan_distance(GOAL) == 0


def test_heuristics_positive_away_from_goal():
    assert misplaced_tiles(ONE_MOVE) > 0
    assert manhattan_distance(ONE_MOVE) > 0


def test_heuristic_accepts_lists():
    assert manhattan_distance([list(r) for r in ONE_MOVE]) == manhattan_distance(ONE_MOVE)


def test_is_solvable():
    assert is_solvable(GOAL)
    assert is_solvable(ONE_MOVE)
    assert not is_solvable(((2, 1, 3), (4, 5, 6), (7, 8, 0)))


def test_all_unique():
    assert all_unique(GOAL)
    assert not all_unique(((1, 1, 3), (4, 5, 6), (7, 8, 0)))
    assert not all_unique(((1, 2, 3), (4, 5, 6), (7, 8, 9)))


def test_is_final_state():
    assert is_final_state(GOAL)
    assert not is_final_state(ONE_MOVE)


def test_blank_position_round_trip():
    r, c = blank_position(CENTER_BLANK)
    assert CENTER_BLANK[r][c] == 0


def test_blank_position_missing():
    with pytest.raises(PuzzleError):
        blank_position(((1, 2, 3), (4, 5, 6), (7, 8, 9)))


def test_format_tiles():
    expected = (
        "---------------------------\n"
        "1\t2\t3\t\n4\t5\t6\t\n7\t8\t0\t\n"
        "---------------------------\n"
    )
    assert format_tiles(GOAL) == expected


def test_parse_tiles_round_trip():
    text = " ".join(str(v) for row in CENTER_BLANK for v in row)
    assert parse_tiles(text) == CENTER_BLANK


def test_parse_tiles_errors():
    with pytest.raises(PuzzleError):
        parse_tiles("1 2 3")
    with pytest.raises(PuzzleError):
        parse_tiles("1 2 3 4 x 6 7 8 0")


def test_validate_errors():
    with pytest.raises(PuzzleError, match="unique"):
        validate(((1, 1, 3), (4, 5, 6), (7, 8, 0)))
    with pytest.raises(PuzzleError, match="not solvable"):
        validate(((2, 1, 3), (4, 5, 6), (7, 8, 0)))
    with pytest.raises(PuzzleError):
        validate(((1, 2), (3, 4)))


def test_validate_returns_grid():
    assert validate([list(r) for r in GOAL]) == GOAL


def test_expand_order_moves_blank_up_left_down_right():
    children = list(PuzzleNode(CENTER_BLANK).expand())
    assert [blank_position(ch.tiles) for ch in children] == [(0, 1), (1, 0), (2, 1), (1, 2)]


def test_expand_children_values():
    root = PuzzleNode(ONE_MOVE, heuristic=manhattan_distance)
    for child in root.expand():
        assert child.parent is root
        assert child.level == root.level + 1
        assert child.g == root.g + 1
        assert child.h == manhattan_distance(child.tiles)
        assert child.f == child.g + child.h
        assert sorted(v for row in child.tiles for v in row) == list(range(9))


def test_expand_corner_has_two_children():
    assert len(list(PuzzleNode(GOAL).expand())) == 2


def test_path_from_root():
    root = PuzzleNode(ONE_MOVE)
    child = next(iter(root.expand()))
    grandchild = next(iter(child.expand()))
    path = grandchild.path()
    assert path == [root, child, grandchild]
    assert len(path) == grandchild.level + 1


def test_report_contents():
    result = SearchResult(PuzzleNode(GOAL), 0)
    report = result.report()
    assert report.startswith("The solution is found!\nThe solution path is as follows.\n")
    assert format_tiles(GOAL) in report
    assert report.endswith(
        "The solution is found at level 0.\nThe total number of steps required are 0.\n"
    )