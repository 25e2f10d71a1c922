# adventsolve

Solutions to a selection of Advent of Code puzzles from 2023 and 2024. Each
puzzle has its own module. The modules take the puzzle input as a string and
return the answer. Malformed input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from pathlib import Path

from adventsolve import y2024_day01

text = Path("input.txt").read_text()
print(y2024_day01.part1(text))
print(y2024_day01.part2(text))
```

## Modules

### 2023

- `y2023_day01`: calibration values. `part1` uses numeric digits only. `part2` also accepts spelled-out digits such as `one` or `nine`.
- `y2023_day02`: cube games. `parse_games(text)` returns `Game` objects (`number`, `rounds`), and each round is a `CubeSet` (`red`, `green`, `blue`). `part1` sums the numbers of games that are possible with 12 red, 13 green and 14 blue cubes. `part2` sums the powers of the minimal cube sets.
- `y2023_day03`: engine schematic. `part1` sums the numbers next to symbols. `part2` sums the gear ratios of `*` symbols that touch exactly two numbers.
- `y2023_day04`: scratchcards. `part1` gives the card points and `part2` the total number of cards after all won copies are counted.
- `y2023_day24`: hailstones. `parse_hailstones(text)` returns `Hailstone` objects (`position`, `velocity`). `intersection_2d(a, b)` returns the crossing point of two paths in the x-y plane, or `None` if the paths are parallel. `part1(text, low=2e14, high=4e14)` counts the pairs whose future paths cross inside the test area.

### 2024

- `y2024_day01`: two location lists. `parse_lists(text)` returns both columns. `part1` gives the total distance and `part2` the similarity score.
- `y2024_day10`: trailheads on a height map. `part1` sums the scores (distinct summits reached) and `part2` sums the ratings (distinct paths).
- `y2024_day11`: stones. `blink(stone)` gives the stones that a single stone becomes. `count_stones(stone, blinks)` is memoised and counts the stones after a number of blinks. `part1` uses 25 blinks and `part2` uses 75.
- `y2024_day12`: garden regions. `find_regions(text)` returns `Region` objects (`plant`, `area`, `perimeter`, `sides`). `part1` prices each region by area times perimeter and `part2` by area times sides.
- `y2024_day13`: claw machines. `parse_machines(text)` returns `ClawMachine` objects. `cramers_rule_2x2(a1, b1, c1, a2, b2, c2)` solves a 2x2 linear system. With integer inputs it returns exact `Fraction` results, and for a singular system it returns infinities. `part2` moves every prize by 10000000000000 on both axes.
- `y2024_day14`: robots on a wrapping grid. `parse_robots(text)` returns `Robot` objects, and `Robot.moved(width, height, steps)` returns the robot after it has moved. `part1(text, width=101, height=103, steps=100)` gives the quadrant safety factor. `part2(text, width=101, height=103, threshold=200)` returns the first time at which a connected cluster of robots reaches the threshold. It raises `ValueError` if that never happens.
- `y2024_day15`: warehouse. `parse_warehouse(text, wide=False)` returns a `Warehouse` and the move string. `Warehouse.push(direction)` moves the robot and pushes boxes, and returns `False` if the move is blocked. `Warehouse.gps_sum()` sums the box coordinates. `str(warehouse)` draws the map. `part2` uses the double-width layout.
- `y2024_day16`: reindeer maze. `parse_maze(text)` returns the rows and the `S` and `E` positions. `part1` gives the lowest score from `S`, starting east, to `E`, where each quarter turn costs 1000.
- `y2024_day17`: three-bit computer. `parse_machine(text)` returns a `Machine`, and `Machine.run()` executes the program and returns its output. `part1` returns the output as a comma-separated string. `part2` returns the lowest register A value that makes the program output itself.
- `y2024_day18`: falling bytes. `parse_coordinates(text)` returns `(x, y)` pairs. `part1(text, size=71, limit=1024)` gives the fewest steps to the exit after `limit` bytes have fallen. `part2(text, size=71)` returns the coordinate of the first byte that cuts off the exit.

## Grid shortest paths

`adventsolve.pathfind` searches character grids. Each step costs 1, and each quarter turn adds `turn_cost`. A walk starts facing east, and cells equal to `wall` cannot be entered.

- `shortest_paths(grid, start, wall, turn_cost)` returns a dict of distances and a dict of predecessor cells.
- `shortest_distance(grid, start, end, wall, turn_cost)` returns the cost of the cheapest walk, or `None` if `end` cannot be reached.
- `trace_path(previous, start, end)` returns the list of cells from `start` to `end`.

## What it does not do

- There is no command-line tool. It does not read input files or download puzzle inputs.
- It does not draw or animate the puzzles.
- The second parts of 2023 day 24 and 2024 day 16 are not solved, so those modules have only `part1`.