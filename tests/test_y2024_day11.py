import pytest

from adventsolve.y2024_day11 import blink, count_stones, part1, part2


def test_blink_zero_becomes_one():
    assert blink(0) == [1]


def test_blink_odd_digits_multiplies():
    assert blink(1) == [2024]


def test_blink_even_digits_splits():
    assert blink(1000) == [10, 0]
    assert blink(12) == [1, 2]


def test_zero_blinks_is_one_stone():
    assert count_stones(125, 0) == 1


@pytest.mark.parametrize("stone", [0, 1, 17, 125, 2024, 99999])
@pytest.mark.parametrize("blinks", [1, 5, 12])
def test_count_stones_recurrence(stone, blinks):
    expected = sum(count_stones(child, blinks - 1) for child in blink(stone))
    assert count_stones(stone, blinks) == expected


def test_sample_after_six_blinks():
    assert count_stones(125, 6) + count_stones(17, 6) == 22


def test_part1_sample():
    assert part1("125 17\n") == 55312


def test_part2_grows_beyond_part1():
    assert part2("125 17\n") > part1("125 17\n")