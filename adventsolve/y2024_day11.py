"""Plutonian pebbles: count stones after repeated blinks."""

from functools import lru_cache


def blink(stone: int) -> list[int]:
    """The stones that one stone turns into after a single blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        split = 10 ** (len(digits) // 2)
        return [stone // split, stone % split]
    return [stone * 2024]


@lru_cache(maxsize=None)
def count_stones(stone: int, blinks: int) -> int:
    """Number of stones one stone becomes after the given number of blinks."""
    if blinks == 0:
        return 1
    return sum(count_stones(child, blinks - 1) for child in blink(stone))


def _solve(text: str, blinks: int) -> int:
    return sum(count_stones(int(s), blinks) for s in text.split())


def part1(text: str) -> int:
    """Stone count after 25 blinks."""
    return _solve(text, 25)


def part2(text: str) -> int:
    """Stone count after 75 blinks."""
    return _solve(text, 75)