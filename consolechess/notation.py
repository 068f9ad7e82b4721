"""Reading moves typed in coordinate notation such as ``e2e4`` or ``e7e8=Q``."""

from __future__ import annotations

from consolechess.types import Move, PieceType, Square

KINGSIDE_CASTLE = "0-0"
QUEENSIDE_CASTLE = "0-0-0"

_FILES = "abcdefgh"
_RANKS = "12345678"
_PROMOTION_PIECES = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
}
_NO_SQUARE = Square(1, 1)


def _is_castle(text: str) -> bool:
    return text in (KINGSIDE_CASTLE, QUEENSIDE_CASTLE)


def _is_two_squares(text: str) -> bool:
    return (
        len(text) == 4
        and text[0] in _FILES
        and text[1] in _RANKS
        and text[2] in _FILES
        and text[3] in _RANKS
    )


def _is_promotion(text: str) -> bool:
    return (
        len(text) == 6
        and text[4] == "="
        and text[5] in _PROMOTION_PIECES
        and text[0] in _FILES
        and text[1] in _RANKS
        and text[2] in _FILES
        and text[3] in "18"
    )


def _squares(text: str) -> tuple[Square, Square]:
    start = Square(_FILES.index(text[0]) + 1, int(text[1]))
    end = Square(_FILES.index(text[2]) + 1, int(text[3]))
    return start, end


def is_valid_move_string(text: str) -> bool:
    """True for a castle, a four-character square pair, or a promotion."""
    return _is_castle(text) or _is_two_squares(text) or _is_promotion(text)


def parse_move(text: str) -> Move:
    """Turn a valid move string into a Move.

    Castles give a1 to a1 with KING (kingside) or PAWN (queenside) as the
    marker; a promotion carries the piece chosen; a plain move promotes to
    a queen should it reach the last rank.  Raises ValueError for a string
    that is not valid.
    """
    if text == KINGSIDE_CASTLE:
        return Move(_NO_SQUARE, _NO_SQUARE, PieceType.KING)
    if text == QUEENSIDE_CASTLE:
        return Move(_NO_SQUARE, _NO_SQUARE, PieceType.PAWN)
    if _is_two_squares(text):
        return Move(*_squares(text))
    if _is_promotion(text):
        return Move(*_squares(text), _PROMOTION_PIECES[text[5]])
    raise ValueError(f"not a valid move string: {text!r}")