"""Hiking trails: trailhead scores and ratings on a height map."""

from collections import Counter

_DIGITS = "0123456789"
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _heights(text: str) -> list[list[int]]:
    return [
        [int(c) if c in _DIGITS else -1 for c in line]
        for line in text.splitlines()
        if line
    ]


def _trail_ends(heights: list[list[int]]) -> list[Counter]:
    """For each trailhead, a count of the paths ending at each summit."""
    height = len(heights)
    width = len(heights[0]) if heights else 0
    memo: dict[tuple[int, int], Counter] = {}

    def ends(x: int, y: int) -> Counter:
        key = (x, y)
        if key in memo:
            return memo[key]
        level = heights[y][x]
        if level == 9:
            result = Counter({key: 1})
        else:
            result = Counter()
            for dx, dy in _STEPS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and heights[ny][nx] == level + 1:
                    result.update(ends(nx, ny))
        memo[key] = result
        return result

    return [
        ends(x, y)
        for y, row in enumerate(heights)
        for x, level in enumerate(row)
        if level == 0
    ]


def part1(text: str) -> int:
    """Sum over trailheads of the number of distinct summits reachable."""
    return sum(len(summits) for summits in _trail_ends(_heights(text)))


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct hiking paths."""
    return sum(sum(summits.values()) for summits in _trail_ends(_heights(text)))