"""Advent of Code puzzle solutions, one module per puzzle, with a command-line front end."""

__version__ = "0.1.0"