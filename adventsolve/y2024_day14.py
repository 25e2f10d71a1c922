"""Restroom robots: wrapping motion, quadrant safety factor and cluster search."""

import re
from dataclasses import dataclass

_ROBOT = re.compile(r"\s*p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)\s*")

_WIDTH = 101
_HEIGHT = 103
_STEPS = 100
_THRESHOLD = 200

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Robot:
    """Position and velocity of one robot."""

    x: int
    y: int
    dx: int
    dy: int

    def moved(self, width: int, height: int, steps: int) -> "Robot":
        """The robot after the given number of steps on a wrapping grid."""
        return Robot(
            (self.x + self.dx * steps) % width,
            (self.y + self.dy * steps) % height,
            self.dx,
            self.dy,
        )


def parse_robots(text: str) -> list[Robot]:
    """Parse lines of the form 'p=x,y v=dx,dy'."""
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROBOT.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed robot line {line!r}")
        robots.append(Robot(*map(int, match.groups())))
    return robots


def _quadrant(x: int, y: int, width: int, height: int) -> int | None:
    midx = width // 2
    midy = height // 2
    if x == midx or y == midy:
        return None
    return int(x > midx) | (int(y > midy) << 1)


def part1(
    text: str, width: int = _WIDTH, height: int = _HEIGHT, steps: int = _STEPS
) -> int:
    """Product of the robot counts in the four quadrants after the given steps."""
    counts = [0, 0, 0, 0]
    for robot in parse_robots(text):
        moved = robot.moved(width, height, steps)
        quadrant = _quadrant(moved.x, moved.y, width, height)
        if quadrant is not None:
            counts[quadrant] += 1
    product = 1
    for count in counts:
        product *= count
    return product


def _largest_cluster(occupied: set[tuple[int, int]]) -> int:
    remaining = set(occupied)
    largest = 0
    while remaining:
        stack = [remaining.pop()]
        size = 0
        while stack:
            x, y = stack.pop()
            size += 1
            for dx, dy in _NEIGHBOURS:
                neighbour = (x + dx, y + dy)
                if neighbour in remaining:
                    remaining.remove(neighbour)
                    stack.append(neighbour)
        largest = max(largest, size)
    return largest


def part2(
    text: str,
    width: int = _WIDTH,
    height: int = _HEIGHT,
    threshold: int = _THRESHOLD,
) -> int:
    """First time at which a connected cluster of robots reaches the threshold."""
    robots = parse_robots(text)
    for time in range(1, width * height + 1):
        occupied = {
            (m.x, m.y) for m in (r.moved(width, height, time) for r in robots)
        }
        if _largest_cluster(occupied) >= threshold:
            return time
    raise ValueError("robots never form a cluster of the requested size")