"""Advent of Code 2022 and 2023 puzzle solvers, a command line runner and small Python exercises."""

__version__ = "0.1.0"