"""Whether a king or a square is attacked by the opposing side."""

from __future__ import annotations

from consolechess.board import Board
from consolechess.geometry import is_move_diagonal
from consolechess.legality import LegalityChecker
from consolechess.types import Color, Move, PieceType, Square


class NoKingError(LookupError):
    """Raised when the side being examined has no king on the board."""


class DangerChecker:
    """Answers attack questions for one side on a snapshot of a board."""

    def __init__(self, board: Board, legality_checker: LegalityChecker, color: Color) -> None:
        self._board = board.copy()
        self._legality = legality_checker
        self._color = color

    def is_king_under_attack(self) -> bool:
        """True if an opposing piece can legally move onto this side's king.

        Raises NoKingError if this side has no king.
        """
        king_square = self._king_position()
        return any(
            king_square in piece.possible_moves()
            and self._legality.is_legal(Move(piece.position, king_square))
            for piece in self._opponents()
        )

    def is_square_under_attack(self, target: Square) -> bool:
        """True if an opposing piece attacks ``target``.

        Pawns attack both forward diagonals whether or not anything stands
        there; other pieces attack the squares they could legally move to.
        """
        for piece in self._opponents():
            if target not in piece.possible_moves():
                continue
            move = Move(piece.position, target)
            if piece.piece_type is PieceType.PAWN:
                if is_move_diagonal(move):
                    return True
            elif self._legality.is_legal(move):
                return True
        return False

    def _opponents(self):
        return (piece for piece in self._board.pieces if piece.color is not self._color)

    def _king_position(self) -> Square:
        for piece in self._board.color_pieces(self._color):
            if piece.piece_type is PieceType.KING:
                return piece.position
        raise NoKingError("No king is found")