"""Solvers for a selection of Advent of Code puzzles from the 2017 and 2018 events."""

__version__ = "0.1.0"