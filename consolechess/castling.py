"""Whether one side may castle on either wing."""

from __future__ import annotations

from consolechess.board import Board
from consolechess.danger import DangerChecker
from consolechess.geometry import orthogonals_between
from consolechess.legality import LegalityChecker
from consolechess.types import Color, Move, PieceType, Square

_KING_FILE = 5
_KINGSIDE_ROOK_FILE = 8
_QUEENSIDE_ROOK_FILE = 1
_KING_TRAVEL = 2


class CastleChecker:
    """Decides castling rights for one side on a snapshot of a board."""

    def __init__(
        self,
        board: Board,
        legality_checker: LegalityChecker,
        danger_checker: DangerChecker,
        color: Color,
    ) -> None:
        self._board = board.copy()
        self._legality = legality_checker
        self._danger = danger_checker
        self._color = color

    @property
    def _rank(self) -> int:
        return 1 if self._color is Color.WHITE else 8

    def can_castle_kingside(self) -> bool:
        """True if castling towards the h-file is allowed."""
        king = Square(_KING_FILE, self._rank)
        rook = Square(_KINGSIDE_ROOK_FILE, self._rank)
        king_path = orthogonals_between(Move(king, rook), _KING_TRAVEL)
        return self._can_castle(king, rook, king_path, king_path)

    def can_castle_queenside(self) -> bool:
        """True if castling towards the a-file is allowed."""
        king = Square(_KING_FILE, self._rank)
        rook = Square(_QUEENSIDE_ROOK_FILE, self._rank)
        king_path = orthogonals_between(Move(king, rook), _KING_TRAVEL)
        between = orthogonals_between(Move(king, rook), 3)
        return self._can_castle(king, rook, king_path, between)

    def _can_castle(
        self,
        king_square: Square,
        rook_square: Square,
        king_path: list[Square],
        between: list[Square],
    ) -> bool:
        king = self._board.piece_at(king_square)
        rook = self._board.piece_at(rook_square)
        if king is None or rook is None:
            return False
        if king.piece_type is not PieceType.KING or rook.piece_type is not PieceType.ROOK:
            return False
        if king.has_moved or rook.has_moved:
            return False
        if self._danger.is_king_under_attack():
            return False
        if any(self._board.piece_at(square) is not None for square in between):
            return False
        return not any(self._danger.is_square_under_attack(square) for square in king_path)