"""Four in a row on a 4x4x4 board, with a minimax opponent and a terminal interface."""

__version__ = "0.1.0"