"""The interactive two-player game played at the console."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from enum import Enum
from typing import TextIO

from consolechess.board import Board
from consolechess.castling import CastleChecker
from consolechess.check import CheckChecker
from consolechess.danger import DangerChecker
from consolechess.dialog import MoveDialog
from consolechess.legality import LegalityChecker
from consolechess.notation import is_valid_move_string, parse_move
from consolechess.pieces import make_piece
from consolechess.types import Color, Move, PieceType


class GameResult(Enum):
    """How a finished game ended."""

    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    FIFTY_MOVE_DRAW = "fifty-move draw"


def is_promotion(board: Board, move: Move) -> bool:
    """True if the piece now on the move's end square is a pawn on its last rank."""
    piece = board.piece_at(move.end)
    if piece is None or piece.piece_type is not PieceType.PAWN:
        return False
    return (move.end.y == 1 and piece.color is Color.BLACK) or (
        move.end.y == 8 and piece.color is Color.WHITE
    )


def _try_move(board: Board, color: Color, text: str, dialog: MoveDialog) -> bool:
    """Play ``text`` for ``color`` if allowed; otherwise explain why and return False."""
    if not is_valid_move_string(text):
        dialog.show_string_not_valid()
        return False

    move = parse_move(text)
    legality = LegalityChecker(board)
    danger = DangerChecker(board, legality, color)
    castling = CastleChecker(board, legality, danger, color)

    if move.promotion_or_castleside is PieceType.KING:
        if not castling.can_castle_kingside():
            dialog.show_illegal_castling()
            return False
        board.castle_kingside(color)
        return True
    if move.promotion_or_castleside is PieceType.PAWN:
        if not castling.can_castle_queenside():
            dialog.show_illegal_castling()
            return False
        board.castle_queenside(color)
        return True

    if not legality.is_legal(move):
        dialog.show_move_not_legal()
        return False
    if not board.has_piece_of_color(color, move.start) and board.piece_at(move.start) is not None:
        dialog.show_piece_wrong_color()
        return False
    if not CheckChecker(board, color).is_king_safe_after_move(move):
        dialog.show_move_puts_king_in_check()
        return False

    if legality.captures_piece(move):
        board.remove_piece_at(move.end)
    board.move_piece(move)

    if is_promotion(board, move):
        board.remove_piece_at(move.end)
        board.add_piece(make_piece(move.promotion_or_castleside, color, move.end))
    return True


def play(read_move: Callable[[], str], dialog: MoveDialog | None = None) -> GameResult:
    """Play a game from the opening position until it ends.

    ``read_move`` is called for each move string after the prompt is shown;
    whatever it raises (EOFError, say) ends the game early by propagating.
    """
    dialog = dialog if dialog is not None else MoveDialog()
    board = Board()
    while True:
        color = dialog.current_turn()
        if CheckChecker(board, color).every_move_checks_self():
            dialog.show_move_history()
            legality = LegalityChecker(board)
            if DangerChecker(board, legality, color).is_king_under_attack():
                dialog.show_checkmate()
                return GameResult.CHECKMATE
            dialog.show_stalemate()
            return GameResult.STALEMATE

        if board.is_fifty_move_rule():
            dialog.show_move_history()
            dialog.show_fifty_move_draw()
            return GameResult.FIFTY_MOVE_DRAW

        while True:
            dialog.show_dialog()
            text = read_move()
            if _try_move(board, color, text, dialog):
                dialog.record_move(text)
                break


def _token_reader(stream: TextIO) -> Callable[[], str]:
    """A reader returning whitespace-separated tokens; EOFError when exhausted."""

    def tokens() -> Iterator[str]:
        for line in stream:
            yield from line.split()

    source = tokens()

    def read() -> str:
        try:
            return next(source)
        except StopIteration:
            raise EOFError("no more input") from None

    return read


def main(argv: list[str] | None = None) -> int:
    """Run a game on standard input and output.

    Returns 0 when the game ends, 1 if input runs out first.
    """
    parser = argparse.ArgumentParser(
        prog="consolechess",
        description="Two-player chess at the console; moves like e2e4, e7e8=Q, 0-0, 0-0-0.",
    )
    parser.parse_args(argv)
    try:
        play(_token_reader(sys.stdin), MoveDialog())
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())