import pytest

from adventsolve.y2023_day01 import part1, part2

SAMPLE1 = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

SAMPLE2 = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen\n"
)


def test_part1_sample():
    assert part1(SAMPLE1) == 142


def test_part2_sample():
    assert part2(SAMPLE2) == 281


def test_part1_is_sum_over_lines():
    lines = SAMPLE1.splitlines()
    assert part1(SAMPLE1) == sum(part1(line + "\n") for line in lines)


def test_part2_matches_part1_without_words():
    assert part2(SAMPLE1) == part1(SAMPLE1)


def test_part1_ignores_spelled_words():
    assert part1("one2three\n") == part1("2\n")


def test_part2_overlapping_words():
    assert part2("oneight\n") == part1("18\n")
    assert part2("twone\n") == part1("21\n")


def test_single_digit_used_twice():
    assert part1("x7y\n") == part1("77\n")


def test_missing_trailing_newline():
    assert part1("1abc2") == part1("1abc2\n")


def test_line_without_digit_raises():
    with pytest.raises(ValueError):
        part1("abc\n")