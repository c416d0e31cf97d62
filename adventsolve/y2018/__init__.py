"""Solvers for the 2018 Advent of Code puzzles, days 1 to 9, 11, 14 and 18."""