"""Engine schematic: part numbers next to symbols, and gear ratios."""

from collections.abc import Callable, Sequence

_DIGITS = "0123456789"
_PART1_SYMBOLS = frozenset("#$%&*+-/=@")
_PART2_SYMBOLS = frozenset("*")

_NEIGHBOURS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def _adjacent_numbers(grid: list[str], width: int, x: int, y: int) -> list[int]:
    numbers: dict[tuple[int, int], int] = {}
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < len(grid)):
            continue
        row = grid[ny]
        if nx >= len(row) or row[nx] not in _DIGITS:
            continue
        start = nx
        while start > 0 and row[start - 1] in _DIGITS:
            start -= 1
        if (start, ny) in numbers:
            continue
        end = nx
        while end < len(row) and row[end] in _DIGITS:
            end += 1
        numbers[(start, ny)] = int(row[start:end])
    return list(numbers.values())


def _solve(
    text: str,
    symbols: frozenset[str],
    accumulate: Callable[[Sequence[int]], int],
) -> int:
    grid = text.splitlines()
    width = len(grid[0]) if grid else 0
    return sum(
        accumulate(_adjacent_numbers(grid, width, x, y))
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char in symbols
    )


def _gear_ratio(numbers: Sequence[int]) -> int:
    if len(numbers) == 2:
        return numbers[0] * numbers[1]
    return 0


def part1(text: str) -> int:
    """Sum of the numbers adjacent to each symbol."""
    return _solve(text, _PART1_SYMBOLS, sum)


def part2(text: str) -> int:
    """Sum of gear ratios of '*' symbols touching exactly two numbers."""
    return _solve(text, _PART2_SYMBOLS, _gear_ratio)