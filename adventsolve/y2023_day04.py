"""Scratchcards: points per card and the cascade of won copies."""

import re

_CARD = re.compile(r"Card\s+(\d+):([\d\s]*)\|([\d\s]*)")


def _match_counts(text: str) -> list[int]:
    counts = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _CARD.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"malformed card line {line!r}")
        winning = {int(n) for n in match.group(2).split()}
        numbers = [int(n) for n in match.group(3).split()]
        counts.append(sum(n in winning for n in numbers))
    return counts


def part1(text: str) -> int:
    """Sum of card points: one for the first match, doubled for each further one."""
    return sum(2 ** (count - 1) for count in _match_counts(text) if count)


def part2(text: str) -> int:
    """Total number of cards held once every won copy has been processed."""
    counts = _match_counts(text)
    copies = [1] * len(counts)
    for index, count in enumerate(counts):
        for won in range(index + 1, min(index + 1 + count, len(counts))):
            copies[won] += copies[index]
    return sum(copies)