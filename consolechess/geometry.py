"""Helpers for the direction of a move and the squares it passes over."""

from __future__ import annotations

from consolechess.types import Move, Square


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_move_diagonal(move: Move) -> bool:
    """True if the file and rank change by the same amount."""
    return abs(move.start.x - move.end.x) == abs(move.start.y - move.end.y)


def is_move_orthogonal(move: Move) -> bool:
    """True if exactly one of file and rank changes."""
    same_file = move.start.x == move.end.x
    same_rank = move.start.y == move.end.y
    return same_file != same_rank


def diagonals_between(move: Move, count: int) -> list[Square]:
    """The first ``count`` squares from the start along the move's diagonal."""
    dx = _sign(move.end.x - move.start.x)
    dy = _sign(move.end.y - move.start.y)
    if dx == 0 or dy == 0:
        return []
    return [
        Square(move.start.x + i * dx, move.start.y + i * dy)
        for i in range(1, count + 1)
    ]


def orthogonals_between(move: Move, count: int) -> list[Square]:
    """The first ``count`` squares from the start along the move's file or rank.

    A move that changes both file and rank yields the squares along the rank
    first, then those along the file.
    """
    dx = _sign(move.end.x - move.start.x)
    dy = _sign(move.end.y - move.start.y)
    squares: list[Square] = []
    if dx:
        squares.extend(
            Square(move.start.x + i * dx, move.start.y) for i in range(1, count + 1)
        )
    if dy:
        squares.extend(
            Square(move.start.x, move.start.y + i * dy) for i in range(1, count + 1)
        )
    return squares