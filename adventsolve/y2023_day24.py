"""Hailstones: count future crossings of 2D paths inside a test area."""

import re
from dataclasses import dataclass

_LINE = re.compile(
    r"\s*(-?\d+),\s*(-?\d+),\s*(-?\d+)\s*@\s*(-?\d+),\s*(-?\d+),\s*(-?\d+)\s*,?\s*"
)

_DEFAULT_LOW = 200000000000000.0
_DEFAULT_HIGH = 400000000000000.0

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Hailstone:
    """Starting position and velocity of one hailstone."""

    position: Vec3
    velocity: Vec3


def parse_hailstones(text: str) -> list[Hailstone]:
    """Parse lines of the form 'x, y, z @ dx, dy, dz'."""
    hailstones = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed hailstone line {line!r}")
        x, y, z, dx, dy, dz = (float(int(v)) for v in match.groups())
        hailstones.append(Hailstone((x, y, z), (dx, dy, dz)))
    return hailstones


def _line_coefficients(stone: Hailstone) -> tuple[float, float, float]:
    x, y, _ = stone.position
    dx, dy, _ = stone.velocity
    if dx == 0:
        return 0.0, 1.0, x
    a, b = -dy, dx
    return a, b, b * y + a * x


def intersection_2d(a: Hailstone, b: Hailstone) -> tuple[float, float] | None:
    """Crossing point of the two paths in the x-y plane, or None if parallel."""
    a1, b1, c1 = _line_coefficients(a)
    a2, b2, c2 = _line_coefficients(b)
    denom = a1 * b2 - a2 * b1
    if denom == 0:
        return None
    x = (c1 * b2 - c2 * b1) / denom
    y = (a1 * c2 - a2 * c1) / denom
    return x, y


def _in_future(stone: Hailstone, x: float) -> bool:
    return (x - stone.position[0]) * stone.velocity[0] >= 0


def part1(text: str, low: float = _DEFAULT_LOW, high: float = _DEFAULT_HIGH) -> int:
    """Count pairs whose future paths cross inside [low, high] on x and y."""
    stones = parse_hailstones(text)
    count = 0
    for i, first in enumerate(stones):
        for second in stones[i + 1:]:
            point = intersection_2d(first, second)
            if point is None:
                continue
            x, y = point
            if not (_in_future(first, x) and _in_future(second, x)):
                continue
            if low <= x <= high and low <= y <= high:
                count += 1
    return count