"""Calibration values: the first and last digit of each line."""

_DIGITS = "0123456789"

_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _digit_at(line: str, index: int, spelled: bool) -> int | None:
    char = line[index]
    if char in _DIGITS:
        return int(char)
    if spelled:
        for word, value in _WORDS.items():
            if line.startswith(word, index):
                return value
    return None


def _calibration_value(line: str, spelled: bool) -> int:
    positions = range(len(line))
    left = next(
        (d for d in (_digit_at(line, i, spelled) for i in positions) if d is not None),
        None,
    )
    right = next(
        (
            d
            for d in (_digit_at(line, i, spelled) for i in reversed(positions))
            if d is not None
        ),
        None,
    )
    if left is None or right is None:
        raise ValueError(f"no digit in line {line!r}")
    return left * 10 + right


def _solve(text: str, spelled: bool) -> int:
    return sum(_calibration_value(line, spelled) for line in text.splitlines())


def part1(text: str) -> int:
    """Sum of calibration values using only numeric digits."""
    return _solve(text, spelled=False)


def part2(text: str) -> int:
    """Sum of calibration values where digits may also be spelled out."""
    return _solve(text, spelled=True)