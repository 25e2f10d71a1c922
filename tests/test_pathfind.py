import pytest

from adventsolve.pathfind import shortest_distance, shortest_paths, trace_path

GRAPH = [
    "###############",
    "#.......#....E#",
    "#.#.###.#.###.#",
    "#.....#.#...#.#",
    "#.###.#####.#.#",
    "#.#.#.......#.#",
    "#.#.#####.###.#",
    "#...........#.#",
    "###.#.#####.#.#",
    "#...#.....#.#.#",
    "#.#.#.###.#.#.#",
    "#.....#...#.#.#",
    "#.###.#.#.#.#.#",
    "#S..#.....#...#",
    "###############",
]

START = (1, 13)
END = (13, 1)


def _assert_valid_path(grid, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
    assert all(grid[y][x] != "#" for x, y in path)


def test_source_case_from_end_to_start_with_turn_cost():
    distance, previous = shortest_paths(GRAPH, END, "#", 100)
    path = trace_path(previous, END, START)
    _assert_valid_path(GRAPH, path, END, START)
    assert distance[END] == 0
    assert distance[START] >= len(path) - 1


def test_without_turn_cost_distance_is_path_length():
    distance, previous = shortest_paths(GRAPH, START, "#", 0)
    path = trace_path(previous, START, END)
    _assert_valid_path(GRAPH, path, START, END)
    assert distance[END] == len(path) - 1


def test_turn_cost_never_lowers_distance():
    plain = shortest_distance(GRAPH, START, END, "#", 0)
    turning = shortest_distance(GRAPH, START, END, "#", 1000)
    assert turning >= plain + 1000


def test_no_turn_cost_is_symmetric():
    there = shortest_distance(GRAPH, START, END, "#", 0)
    back = shortest_distance(GRAPH, END, START, "#", 0)
    assert there == back


def test_straight_east_corridor_has_no_turn_cost():
    grid = ["......"]
    assert shortest_distance(grid, (0, 0), (5, 0), "#", 0) == shortest_distance(
        grid, (0, 0), (5, 0), "#", 1000
    )


def test_starting_northward_costs_one_turn():
    grid = [".", ".", "."]
    plain = shortest_distance(grid, (0, 2), (0, 0), "#", 0)
    turning = shortest_distance(grid, (0, 2), (0, 0), "#", 100)
    assert turning - plain == 100


def test_unreachable_end_gives_none_and_trace_fails():
    grid = [".#."]
    assert shortest_distance(grid, (0, 0), (2, 0), "#", 0) is None
    _, previous = shortest_paths(grid, (0, 0), "#", 0)
    with pytest.raises(ValueError):
        trace_path(previous, (0, 0), (2, 0))


def test_start_on_wall_is_rejected():
    with pytest.raises(ValueError):
        shortest_paths(GRAPH, (0, 0), "#", 0)


def test_trace_to_start_is_single_cell():
    _, previous = shortest_paths(GRAPH, START, "#", 0)
    assert trace_path(previous, START, START) == [START]


def test_integer_grid_with_integer_wall():
    grid = [[0, 1, 0], [0, 1, 0], [0, 0, 0]]
    distance, previous = shortest_paths(grid, (0, 0), 1, 0)
    path = trace_path(previous, (0, 0), (2, 0))
    assert distance[(2, 0)] == len(path) - 1
    assert all(grid[y][x] == 0 for x, y in path)