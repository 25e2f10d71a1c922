"""Cube games: which games are possible and the power of minimal sets."""

import re
from dataclasses import dataclass

_GAME = re.compile(r"Game (\d+):(.*)")
_CUBE = re.compile(r"\s*(\d+) (red|green|blue)\s*")

_LIMIT = {"red": 12, "green": 13, "blue": 14}


@dataclass(frozen=True)
class CubeSet:
    """Counts of cubes of each colour shown in one round."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Game:
    """A numbered game and the rounds revealed in it."""

    number: int
    rounds: tuple[CubeSet, ...]


def _parse_round(text: str) -> CubeSet:
    counts: dict[str, int] = {}
    for cube in text.split(","):
        match = _CUBE.fullmatch(cube)
        if match is None:
            raise ValueError(f"malformed cube description {cube!r}")
        counts[match.group(2)] = int(match.group(1))
    return CubeSet(**counts)


def parse_games(text: str) -> list[Game]:
    """Parse every non-blank line into a Game."""
    games = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _GAME.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed game line {line!r}")
        rounds = tuple(_parse_round(part) for part in match.group(2).split(";"))
        games.append(Game(int(match.group(1)), rounds))
    return games


def _possible(cubes: CubeSet) -> bool:
    return (
        cubes.red <= _LIMIT["red"]
        and cubes.green <= _LIMIT["green"]
        and cubes.blue <= _LIMIT["blue"]
    )


def _power(game: Game) -> int:
    red = max((r.red for r in game.rounds), default=0)
    green = max((r.green for r in game.rounds), default=0)
    blue = max((r.blue for r in game.rounds), default=0)
    return red * green * blue


def part1(text: str) -> int:
    """Sum of the numbers of games possible with 12 red, 13 green, 14 blue."""
    return sum(
        game.number
        for game in parse_games(text)
        if all(_possible(r) for r in game.rounds)
    )


def part2(text: str) -> int:
    """Sum of the powers of the minimal cube set of each game."""
    return sum(_power(game) for game in parse_games(text))