"""Shortest paths on a character grid where changing direction has a cost."""

import heapq
import itertools
from collections.abc import Sequence

Cell = tuple[int, int]

# East first, then clockwise; a walker starts out facing east.
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _turns(current: int, new: int) -> int:
    """Number of quarter turns between two direction indices."""
    diff = abs(current - new) % 4
    return min(diff, 4 - diff)


def _is_open(grid: Sequence[Sequence], cell: Cell, wall) -> bool:
    x, y = cell
    return 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x] != wall


def shortest_paths(
    grid: Sequence[Sequence], start: Cell, wall, turn_cost: int
) -> tuple[dict[Cell, int], dict[Cell, Cell]]:
    """Distances from start to every reachable cell, and each cell's predecessor.

    Each step costs 1, and every quarter turn costs turn_cost more. The walk
    starts facing east. Cells equal to wall cannot be entered.
    """
    if not _is_open(grid, start, wall):
        raise ValueError(f"start {start} is not an open cell of the grid")

    distance: dict[Cell, int] = {}
    previous: dict[Cell, Cell] = {}
    settled: set[tuple[Cell, int]] = set()
    best: dict[tuple[Cell, int], int] = {(start, 0): 0}
    order = itertools.count()
    heap: list = [(0, next(order), start, 0, None)]

    while heap:
        cost, _, cell, direction, came_from = heapq.heappop(heap)
        if (cell, direction) in settled:
            continue
        settled.add((cell, direction))
        if cell not in distance:
            distance[cell] = cost
            if came_from is not None:
                previous[cell] = came_from
        x, y = cell
        for new_direction, (dx, dy) in enumerate(_DIRECTIONS):
            neighbour = (x + dx, y + dy)
            if not _is_open(grid, neighbour, wall):
                continue
            state = (neighbour, new_direction)
            if state in settled:
                continue
            new_cost = cost + 1 + turn_cost * _turns(direction, new_direction)
            if new_cost < best.get(state, new_cost + 1):
                best[state] = new_cost
                heapq.heappush(
                    heap, (new_cost, next(order), neighbour, new_direction, cell)
                )

    return distance, previous


def shortest_distance(
    grid: Sequence[Sequence], start: Cell, end: Cell, wall, turn_cost: int
) -> int | None:
    """Cost of the cheapest walk from start to end, or None if unreachable."""
    distance, _ = shortest_paths(grid, start, wall, turn_cost)
    return distance.get(end)


def trace_path(previous: dict[Cell, Cell], start: Cell, end: Cell) -> list[Cell]:
    """Cells from start to end following each cell's predecessor."""
    path = [end]
    cell = end
    while cell != start:
        try:
            cell = previous[cell]
        except KeyError:
            raise ValueError(f"{end} is not reachable from {start}") from None
        path.append(cell)
    path.reverse()
    return path