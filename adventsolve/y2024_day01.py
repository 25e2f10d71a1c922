"""Location lists: total distance and similarity score of two columns."""

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated integers into two lists."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers in line {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(text: str) -> int:
    """Sum of distances between the sorted left and right lists."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Sum of each left number times how often it appears in the right list."""
    left, right = parse_lists(text)
    occurrences = Counter(right)
    return sum(n * occurrences[n] for n in left)