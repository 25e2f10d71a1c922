import pytest

from adventsolve.y2024_day15 import Warehouse, parse_warehouse, part1, part2

SMALL = "#####\n#@O.#\n#####\n\n>\n"
TALL = "#######\n#.....#\n#..O..#\n#..@..#\n#######\n\n^\n"
STACKED = (
    "########\n"
    "#......#\n"
    "#......#\n"
    "#..OO..#\n"
    "#...O..#\n"
    "#...@..#\n"
    "########\n"
    "\n"
    "^\n"
)


def _count(warehouse: Warehouse, chars: str) -> int:
    return sum(row.count(c) for row in warehouse.grid for c in chars)


def test_parse_places_robot():
    warehouse, moves = parse_warehouse(SMALL)
    x, y = warehouse.robot
    assert warehouse.grid[y][x] == "@"
    assert moves == ">"


def test_str_round_trips_map():
    warehouse, _ = parse_warehouse(SMALL)
    assert str(warehouse) == SMALL.split("\n\n")[0] + "\n"


def test_parse_without_robot_raises():
    with pytest.raises(ValueError):
        parse_warehouse("###\n#.#\n###\n\n<\n")


def test_push_moves_box_and_robot():
    warehouse, _ = parse_warehouse(SMALL)
    x, y = warehouse.robot
    assert warehouse.push(">")
    assert warehouse.robot == (x + 1, y)
    assert _count(warehouse, "O") == 1


def test_push_blocked_leaves_grid_unchanged():
    warehouse, _ = parse_warehouse(SMALL)
    warehouse.push(">")
    before = str(warehouse)
    robot = warehouse.robot
    assert not warehouse.push(">")
    assert str(warehouse) == before
    assert warehouse.robot == robot


def test_push_unknown_direction():
    warehouse, _ = parse_warehouse(SMALL)
    with pytest.raises(ValueError):
        warehouse.push("x")


def test_part1_small():
    assert part1(SMALL) == 103


def test_wide_parse_doubles_width():
    narrow, _ = parse_warehouse(TALL)
    wide, _ = parse_warehouse(TALL, wide=True)
    assert all(len(w) == 2 * len(n) for w, n in zip(wide.grid, narrow.grid))
    assert _count(wide, "[") == _count(narrow, "O")
    assert wide.robot == (2 * narrow.robot[0], narrow.robot[1])


def test_wide_vertical_push_moves_box_up():
    warehouse, _ = parse_warehouse(TALL, wide=True)
    before = warehouse.gps_sum()
    assert warehouse.push("^")
    assert warehouse.gps_sum() == before - 100


def test_wide_push_against_wall_blocked():
    text = "#######\n#..O..#\n#..@..#\n#######\n\n^\n"
    warehouse, _ = parse_warehouse(text, wide=True)
    before = str(warehouse)
    assert not warehouse.push("^")
    assert str(warehouse) == before


def test_part2_matches_single_push():
    warehouse, _ = parse_warehouse(TALL, wide=True)
    warehouse.push("^")
    assert part2(TALL) == warehouse.gps_sum()