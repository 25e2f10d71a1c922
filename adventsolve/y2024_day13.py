"""Claw machines: cheapest button presses to reach each prize."""

import math
import re
from dataclasses import dataclass
from fractions import Fraction

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\s*"
    r"Button B: X\+(\d+), Y\+(\d+)\s*"
    r"Prize: X=(\d+), Y=(\d+)"
)

_PRIZE_OFFSET = 10000000000000
_TOLERANCE = 0.00000001


@dataclass(frozen=True)
class ClawMachine:
    """Movement of buttons A and B and the position of the prize."""

    ax: int
    ay: int
    bx: int
    by: int
    prize_x: int
    prize_y: int


def parse_machines(text: str) -> list[ClawMachine]:
    """Parse every button A / button B / prize block."""
    machines = [ClawMachine(*map(int, m.groups())) for m in _MACHINE.finditer(text)]
    if not machines and text.strip():
        raise ValueError("no claw machine found in input")
    return machines


def _divide(numerator, denominator):
    if isinstance(numerator, int) and isinstance(denominator, int):
        return Fraction(numerator, denominator)
    return numerator / denominator


def cramers_rule_2x2(a1, b1, c1, a2, b2, c2):
    """Solve a1*x + b1*y = c1, a2*x + b2*y = c2; infinite when singular."""
    det = a1 * b2 - a2 * b1
    if det == 0:
        return math.inf, math.inf
    x = _divide(c1 * b2 - c2 * b1, det)
    y = _divide(a1 * c2 - a2 * c1, det)
    return x, y


def _is_integral(value) -> bool:
    if isinstance(value, Fraction):
        return value.denominator == 1
    if math.isinf(value) or math.isnan(value):
        return False
    return abs(int(value) - value) < _TOLERANCE


def _cost(machine: ClawMachine, offset: int) -> int:
    a, b = cramers_rule_2x2(
        machine.ax, machine.bx, machine.prize_x + offset,
        machine.ay, machine.by, machine.prize_y + offset,
    )
    if _is_integral(a) and _is_integral(b):
        return int(a) * 3 + int(b)
    return 0


def part1(text: str) -> int:
    """Tokens needed to win every winnable prize."""
    return sum(_cost(m, 0) for m in parse_machines(text))


def part2(text: str) -> int:
    """Tokens needed with prizes moved by 10000000000000 on both axes."""
    return sum(_cost(m, _PRIZE_OFFSET) for m in parse_machines(text))