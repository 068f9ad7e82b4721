"""Whether a move leaves the mover's own king safe, and mate detection."""

from __future__ import annotations

from consolechess.board import Board
from consolechess.danger import DangerChecker
from consolechess.legality import LegalityChecker
from consolechess.types import Color, Move


class CheckChecker:
    """Examines the consequences of moves for one side's king."""

    def __init__(self, board: Board, color: Color) -> None:
        self._board = board.copy()
        self._color = color

    def is_king_safe_after_move(self, move: Move) -> bool:
        """True if this side's king is not attacked once ``move`` is played."""
        after = self._board.copy()
        if after.piece_at(move.end) is not None:
            after.remove_piece_at(move.end)
        after.move_piece(move)
        legality = LegalityChecker(after)
        return not DangerChecker(after, legality, self._color).is_king_under_attack()

    def every_move_checks_self(self) -> bool:
        """True if no legal move leaves this side's king safe (mate or stalemate)."""
        moves = LegalityChecker(self._board).all_possible_moves(self._color)
        return not any(self.is_king_safe_after_move(move) for move in moves)