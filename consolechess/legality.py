"""Whether a move obeys the movement rules of the piece making it."""

from __future__ import annotations

from consolechess.board import Board
from consolechess.geometry import (
    diagonals_between,
    is_move_diagonal,
    is_move_orthogonal,
    orthogonals_between,
)
from consolechess.pieces import Piece
from consolechess.types import Color, Move, PieceType, Square


class LegalityChecker:
    """Checks moves against a snapshot of a board.

    Checks ignore whether the mover's own king is left in check.
    """

    def __init__(self, board: Board) -> None:
        self._board = board.copy()

    def is_legal(self, move: Move) -> bool:
        """True if the piece on the start square may move to the end square."""
        piece = self._board.piece_at(move.start)
        if piece is None:
            return False
        if move.end not in piece.possible_moves():
            return False
        diagonal = is_move_diagonal(move)
        if diagonal and self._is_piece_in_diagonal(move):
            return False
        if is_move_orthogonal(move) and self._is_piece_in_line(move):
            return False

        target = self._board.piece_at(move.end)
        if target is not None and target.color is piece.color:
            return False

        if piece.piece_type is PieceType.PAWN:
            if diagonal:
                if self._is_en_passant(move, piece):
                    return True
                if target is None:
                    return False
            else:
                if target is not None:
                    return False
                if abs(move.end.y - move.start.y) == 2 and piece.has_moved:
                    return False
        return True

    def captures_piece(self, move: Move) -> bool:
        """True if an opposing piece stands on the move's end square."""
        piece = self._board.piece_at(move.start)
        target = self._board.piece_at(move.end)
        return piece is not None and target is not None and target.color is not piece.color

    def all_possible_moves(self, color: Color) -> list[Move]:
        """Every legal move of the pieces of ``color``."""
        return [
            move
            for piece in self._board.color_pieces(color)
            for move in (Move(piece.position, end) for end in piece.possible_moves())
            if self.is_legal(move)
        ]

    def _any_occupied(self, squares: list[Square]) -> bool:
        return any(self._board.piece_at(square) is not None for square in squares)

    def _is_piece_in_diagonal(self, move: Move) -> bool:
        count = abs(move.end.x - move.start.x) - 1
        return count > 0 and self._any_occupied(diagonals_between(move, count))

    def _is_piece_in_line(self, move: Move) -> bool:
        if move.start.x == move.end.x:
            count = abs(move.end.y - move.start.y) - 1
        else:
            count = abs(move.end.x - move.start.x) - 1
        return count > 0 and self._any_occupied(orthogonals_between(move, count))

    def _is_en_passant(self, move: Move, pawn: Piece) -> bool:
        last = self._board.last_move
        x, y = move.end.x, move.end.y
        if pawn.color is Color.WHITE and pawn.position.y == 5:
            return last == Move(Square(x, y + 1), Square(x, y - 1))
        if pawn.color is Color.BLACK and pawn.position.y == 4:
            return last == Move(Square(x, y - 1), Square(x, y + 1))
        return False