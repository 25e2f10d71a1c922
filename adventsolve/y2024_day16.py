"""Reindeer maze: cheapest route where every quarter turn costs 1000."""

from adventsolve.pathfind import Cell, shortest_distance

_TURN_COST = 1000
_WALL = "#"


def parse_maze(text: str) -> tuple[list[str], Cell, Cell]:
    """The maze rows and the positions of 'S' and 'E'."""
    grid = [line for line in text.splitlines() if line]
    start = end = None
    for y, row in enumerate(grid):
        if "S" in row:
            start = (row.index("S"), y)
        if "E" in row:
            end = (row.index("E"), y)
    if start is None or end is None:
        raise ValueError("maze needs both a start 'S' and an end 'E'")
    return grid, start, end


def part1(text: str) -> int:
    """Lowest score from S (facing east) to E."""
    grid, start, end = parse_maze(text)
    score = shortest_distance(grid, start, end, _WALL, _TURN_COST)
    if score is None:
        raise ValueError("the end of the maze cannot be reached")
    return score