"""Basic value types: colours, piece kinds, squares and moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

BOARD_SIZE = 8


class Color(Enum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1


class PieceType(Enum):
    """Kind of chess piece."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5


@dataclass(frozen=True)
class Square:
    """A board square; ``x`` is the file and ``y`` the rank, both 1 to 8."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not 1 <= self.x <= BOARD_SIZE:
            raise ValueError("x is not between 1-8")
        if not 1 <= self.y <= BOARD_SIZE:
            raise ValueError("y is not between 1-8")


@dataclass(frozen=True)
class Move:
    """A move from one square to another.

    ``promotion_or_castleside`` is KING for a kingside castle, PAWN for a
    queenside castle, and otherwise the piece a pawn promotes to.  It takes
    no part in equality.
    """

    start: Square
    end: Square
    promotion_or_castleside: PieceType = field(default=PieceType.QUEEN, compare=False)