"""Falling bytes: shortest escape from a corrupting memory grid."""

import re

from adventsolve.pathfind import Cell, shortest_distance

_SIZE = 71
_LIMIT = 1024
_COORDINATE = re.compile(r"\s*(\d+),(\d+)\s*")
_WALL = "#"


def parse_coordinates(text: str) -> list[Cell]:
    """Parse lines of the form 'x,y'."""
    coordinates = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _COORDINATE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed coordinate line {line!r}")
        coordinates.append((int(match.group(1)), int(match.group(2))))
    return coordinates


def _grid(corrupted: list[Cell], size: int) -> list[str]:
    blocked = set(corrupted)
    return [
        "".join(_WALL if (x, y) in blocked else "." for x in range(size))
        for y in range(size)
    ]


def _escape(corrupted: list[Cell], size: int) -> int | None:
    start, end = (0, 0), (size - 1, size - 1)
    if start in corrupted:
        return None
    return shortest_distance(_grid(corrupted, size), start, end, _WALL, 0)


def part1(text: str, size: int = _SIZE, limit: int = _LIMIT) -> int:
    """Fewest steps from the top-left to the bottom-right after limit bytes fall."""
    steps = _escape(parse_coordinates(text)[:limit], size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text: str, size: int = _SIZE) -> Cell:
    """The first falling byte that cuts the exit off from the start."""
    coordinates = parse_coordinates(text)
    if _escape(coordinates, size) is not None:
        raise ValueError("the exit stays reachable after every byte falls")
    low, high = 0, len(coordinates)
    # Invariant: the first `low` bytes leave a path, the first `high` do not.
    while high - low > 1:
        middle = (low + high) // 2
        if _escape(coordinates[:middle], size) is None:
            high = middle
        else:
            low = middle
    return coordinates[high - 1]