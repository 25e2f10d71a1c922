"""Solutions to Advent of Code puzzles from 2023 and 2024, one module per puzzle."""

__version__ = "0.1.0"