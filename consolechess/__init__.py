"""Two-player terminal chess: board, move rules, check and castling tests, and the console game."""

__version__ = "0.1.0"