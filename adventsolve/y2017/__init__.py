"""Solvers for the 2017 Advent of Code puzzles, days 1 to 7."""