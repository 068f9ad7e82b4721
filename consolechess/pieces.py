"""Chess pieces and the squares each can reach on an empty board."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import ClassVar

from consolechess.types import BOARD_SIZE, Color, PieceType, Square


def _on_board(x: int, y: int) -> bool:
    return 1 <= x <= BOARD_SIZE and 1 <= y <= BOARD_SIZE


def _squares(coords: Iterable[tuple[int, int]]) -> Iterator[Square]:
    return (Square(x, y) for x, y in coords if _on_board(x, y))


def _diagonal_coords(x: int, y: int) -> Iterator[tuple[int, int]]:
    for i in range(1, BOARD_SIZE):
        yield from ((x + i, y + i), (x + i, y - i), (x - i, y + i), (x - i, y - i))


def _straight_coords(x: int, y: int) -> Iterator[tuple[int, int]]:
    for i in range(1, BOARD_SIZE + 1):
        if i != y:
            yield x, i
        if i != x:
            yield i, y


class Piece(ABC):
    """A piece of one colour standing on a square."""

    piece_type: ClassVar[PieceType]

    def __init__(self, color: Color, position: Square) -> None:
        self.color = color
        self.position = position
        self.has_moved = False

    @abstractmethod
    def possible_moves(self) -> list[Square]:
        """Squares the piece could reach ignoring all other pieces."""

    def clone(self) -> Piece:
        """Return an independent copy of this piece."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.color.name}, "
            f"({self.position.x}, {self.position.y}), has_moved={self.has_moved})"
        )


class Pawn(Piece):
    piece_type = PieceType.PAWN

    def possible_moves(self) -> list[Square]:
        x, y = self.position.x, self.position.y
        step = 1 if self.color is Color.WHITE else -1
        moves: list[Square] = []
        if _on_board(x, y + step):
            moves.extend(_squares([(x, y + step), (x + 1, y + step), (x - 1, y + step)]))
        if not self.has_moved and _on_board(x, y + 2 * step):
            moves.append(Square(x, y + 2 * step))
        return moves


class Knight(Piece):
    piece_type = PieceType.KNIGHT

    _OFFSETS: ClassVar[tuple[tuple[int, int], ...]] = (
        (2, 1), (2, -1), (-2, 1), (-2, -1),
        (1, 2), (-1, 2), (1, -2), (-1, -2),
    )

    def possible_moves(self) -> list[Square]:
        x, y = self.position.x, self.position.y
        return list(_squares((x + dx, y + dy) for dx, dy in self._OFFSETS))


class Bishop(Piece):
    piece_type = PieceType.BISHOP

    def possible_moves(self) -> list[Square]:
        return list(_squares(_diagonal_coords(self.position.x, self.position.y)))


class Rook(Piece):
    piece_type = PieceType.ROOK

    def possible_moves(self) -> list[Square]:
        return list(_squares(_straight_coords(self.position.x, self.position.y)))


class Queen(Piece):
    piece_type = PieceType.QUEEN

    def possible_moves(self) -> list[Square]:
        x, y = self.position.x, self.position.y
        return [*_squares(_diagonal_coords(x, y)), *_squares(_straight_coords(x, y))]


class King(Piece):
    piece_type = PieceType.KING

    _OFFSETS: ClassVar[tuple[tuple[int, int], ...]] = (
        (1, 1), (1, -1), (1, 0),
        (-1, 1), (-1, -1), (-1, 0),
        (0, 1), (0, -1),
    )

    def possible_moves(self) -> list[Square]:
        x, y = self.position.x, self.position.y
        return list(_squares((x + dx, y + dy) for dx, dy in self._OFFSETS))


_PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    cls.piece_type: cls for cls in (Pawn, Knight, Bishop, Rook, Queen, King)
}


def make_piece(piece_type: PieceType, color: Color, position: Square) -> Piece:
    """Create a piece of the given kind, colour and position."""
    return _PIECE_CLASSES[piece_type](color, position)