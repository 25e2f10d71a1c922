"""Garden plots: fence price by perimeter and by number of sides."""

from dataclasses import dataclass

_UP, _DOWN, _LEFT, _RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
_DIRECTIONS = (_RIGHT, _LEFT, _DOWN, _UP)
# Direction walked along a fence to find the start of its side.
_WALK = {_RIGHT: _UP, _LEFT: _UP, _DOWN: _LEFT, _UP: _LEFT}


@dataclass(frozen=True)
class Region:
    """A connected area of one plant type and its fence measurements."""

    plant: str
    area: int
    perimeter: int
    sides: int


def _measure(cells: set[tuple[int, int]], plant: str) -> Region:
    perimeter = 0
    sides = 0
    for x, y in cells:
        for dx, dy in _DIRECTIONS:
            if (x + dx, y + dy) in cells:
                continue
            perimeter += 1
            wx, wy = _WALK[(dx, dy)]
            before = (x + wx, y + wy)
            continues = before in cells and (before[0] + dx, before[1] + dy) not in cells
            if not continues:
                sides += 1
    return Region(plant, len(cells), perimeter, sides)


def find_regions(text: str) -> list[Region]:
    """All regions of the map, in order of their first cell."""
    grid = [line for line in text.splitlines() if line]
    height = len(grid)
    visited: set[tuple[int, int]] = set()
    regions = []
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in visited:
                continue
            cells = {(x, y)}
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for dx, dy in _DIRECTIONS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= ny < height
                        and 0 <= nx < len(grid[ny])
                        and (nx, ny) not in cells
                        and grid[ny][nx] == plant
                    ):
                        cells.add((nx, ny))
                        stack.append((nx, ny))
            visited |= cells
            regions.append(_measure(cells, plant))
    return regions


def part1(text: str) -> int:
    """Total price using area times perimeter."""
    return sum(r.area * r.perimeter for r in find_regions(text))


def part2(text: str) -> int:
    """Total price using area times number of sides."""
    return sum(r.area * r.sides for r in find_regions(text))