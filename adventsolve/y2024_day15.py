"""Warehouse robot: pushing boxes, in normal and double-width layouts."""

from collections import deque
from dataclasses import dataclass

_DIRECTIONS = {
    "<": (-1, 0),
    ">": (1, 0),
    "^": (0, -1),
    "v": (0, 1),
}

_WIDE = {"#": "##", ".": "..", "O": "[]", "@": "@."}


@dataclass
class Warehouse:
    """The warehouse grid and the robot's position in it."""

    grid: list[list[str]]
    robot: tuple[int, int]

    def push(self, direction: str) -> bool:
        """Move the robot one step, pushing boxes; False if blocked."""
        try:
            dx, dy = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None

        seen = {self.robot}
        queue = deque([self.robot])
        while queue:
            x, y = queue.popleft()
            nx, ny = x + dx, y + dy
            char = self.grid[ny][nx]
            if char == "#":
                return False
            cells = []
            if char == "O":
                cells.append((nx, ny))
            elif char == "[":
                cells += [(nx, ny), (nx + 1, ny)]
            elif char == "]":
                cells += [(nx, ny), (nx - 1, ny)]
            for cell in cells:
                if cell not in seen:
                    seen.add(cell)
                    queue.append(cell)

        contents = {(x, y): self.grid[y][x] for x, y in seen}
        for x, y in seen:
            self.grid[y][x] = "."
        for (x, y), char in contents.items():
            self.grid[y + dy][x + dx] = char
        self.robot = (self.robot[0] + dx, self.robot[1] + dy)
        return True

    def gps_sum(self) -> int:
        """Sum of 100 * row + column over every box."""
        return sum(
            100 * y + x
            for y, row in enumerate(self.grid)
            for x, char in enumerate(row)
            if char in "O["
        )

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.grid)


def parse_warehouse(text: str, wide: bool = False) -> tuple[Warehouse, str]:
    """Parse the map and the move list; wide doubles every map cell."""
    layout, _, moves = text.partition("\n\n")
    grid = []
    robot = None
    for y, line in enumerate(l for l in layout.splitlines() if l):
        row = "".join(_WIDE.get(c, c * 2) for c in line) if wide else line
        if "@" in row:
            robot = (row.index("@"), y)
        grid.append(list(row))
    if robot is None:
        raise ValueError("warehouse map has no robot")
    return Warehouse(grid, robot), "".join(moves.split())


def _solve(text: str, wide: bool) -> int:
    warehouse, moves = parse_warehouse(text, wide)
    for move in moves:
        warehouse.push(move)
    return warehouse.gps_sum()


def part1(text: str) -> int:
    """GPS sum after all moves on the normal map."""
    return _solve(text, wide=False)


def part2(text: str) -> int:
    """GPS sum after all moves on the double-width map."""
    return _solve(text, wide=True)