"""Worked solutions to classic algorithm drills, small puzzles and process helpers."""

__version__ = "0.1.0"