import pytest

from consolechess.board import Board
from consolechess.legality import LegalityChecker
from consolechess.pieces import Pawn, Rook
from consolechess.types import Color, Move, Square


def _move(x1, y1, x2, y2):
    return Move(Square(x1, y1), Square(x2, y2))


def test_checker_uses_snapshot_of_board():
    board = Board()
    checker = LegalityChecker(board)
    board.remove_piece_at(Square(2, 1))
    assert checker.is_legal(_move(2, 1, 3, 3)) is True


def test_move_is_illegal_if_no_piece_on_square():
    assert LegalityChecker(Board()).is_legal(_move(4, 4, 3, 3)) is False


def test_legal_knight_move_is_possible():
    assert LegalityChecker(Board()).is_legal(_move(2, 1, 3, 3)) is True


def test_knight_cant_make_illegal_move():
    assert LegalityChecker(Board()).is_legal(_move(2, 1, 3, 4)) is False


def test_legal_pawn_move_is_possible():
    assert LegalityChecker(Board()).is_legal(_move(2, 2, 2, 3)) is True


def test_illegal_pawn_move_is_not_possible():
    assert LegalityChecker(Board()).is_legal(_move(2, 2, 2, 5)) is False


def test_rook_cant_move_through_pawns():
    assert LegalityChecker(Board()).is_legal(_move(1, 1, 1, 4)) is False


@pytest.mark.parametrize("blocker_color", [Color.WHITE, Color.BLACK])
def test_rook_cant_move_through_piece_far_away(blocker_color):
    board = Board()
    board.add_piece(Pawn(blocker_color, Square(4, 3)))
    board.add_piece(Rook(Color.WHITE, Square(8, 3)))
    assert LegalityChecker(board).is_legal(_move(8, 3, 1, 3)) is False


def test_bishop_cant_move_through_pawns():
    assert LegalityChecker(Board()).is_legal(_move(3, 1, 5, 3)) is False


def test_queen_cant_move_through_pawns():
    assert LegalityChecker(Board()).is_legal(_move(4, 1, 4, 3)) is False


def test_pawn_cant_move_through_pawns():
    board = Board()
    board.add_piece(Pawn(Color.WHITE, Square(4, 3)))
    assert LegalityChecker(board).is_legal(_move(4, 2, 4, 4)) is False


def test_illegal_to_capture_own_piece():
    board = Board()
    board.add_piece(Pawn(Color.WHITE, Square(3, 3)))
    assert LegalityChecker(board).is_legal(_move(2, 1, 3, 3)) is False


def test_legal_to_capture_other_piece():
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(3, 3)))
    assert LegalityChecker(board).is_legal(_move(2, 1, 3, 3)) is True


def test_pawn_can_not_move_diagonally():
    assert LegalityChecker(Board()).is_legal(_move(2, 2, 3, 3)) is False


def test_pawn_can_capture_diagonally():
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(3, 3)))
    assert LegalityChecker(board).is_legal(_move(2, 2, 3, 3)) is True


def test_pawn_can_not_capture_straight():
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(2, 3)))
    assert LegalityChecker(board).is_legal(_move(2, 2, 2, 3)) is False


def test_pawn_can_not_move_two_forwards_if_it_has_already_moved():
    board = Board()
    board.piece_at(Square(2, 2)).has_moved = True
    assert LegalityChecker(board).is_legal(_move(2, 2, 2, 4)) is False


def test_pawn_capturing_piece_is_recognized():
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(3, 3)))
    assert LegalityChecker(board).captures_piece(_move(2, 2, 3, 3)) is True


def test_pawn_not_capturing_piece_is_recognized():
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(3, 3)))
    assert LegalityChecker(board).captures_piece(_move(2, 2, 2, 3)) is False


def test_knight_capturing_piece_is_recognized():
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(3, 3)))
    assert LegalityChecker(board).captures_piece(_move(2, 1, 3, 3)) is True


def test_knight_cant_capture_own_piece():
    board = Board()
    board.add_piece(Pawn(Color.WHITE, Square(3, 3)))
    assert LegalityChecker(board).captures_piece(_move(2, 1, 3, 3)) is False


def test_knight_not_capturing_piece_is_recognized():
    assert LegalityChecker(Board()).captures_piece(_move(2, 1, 2, 3)) is False


@pytest.mark.parametrize(
    "double_step, capture",
    [
        (_move(4, 7, 4, 5), _move(3, 5, 4, 6)),
        (_move(2, 7, 2, 5), _move(3, 5, 2, 6)),
    ],
)
def test_white_can_capture_en_passant(double_step, capture):
    board = Board()
    board.add_piece(Pawn(Color.WHITE, Square(3, 5)))
    board.move_piece(double_step)
    assert LegalityChecker(board).is_legal(capture) is True


def test_white_cannot_capture_en_passant_without_last_move():
    board = Board()
    board.add_piece(Pawn(Color.WHITE, Square(3, 5)))
    assert LegalityChecker(board).is_legal(_move(3, 5, 4, 6)) is False


def test_white_cannot_capture_en_passant_later():
    board = Board()
    board.add_piece(Pawn(Color.WHITE, Square(3, 5)))
    board.move_piece(_move(2, 7, 2, 5))
    board.move_piece(_move(2, 1, 3, 3))
    assert LegalityChecker(board).is_legal(_move(3, 5, 4, 6)) is False


@pytest.mark.parametrize(
    "double_step, capture",
    [
        (_move(4, 2, 4, 4), _move(3, 4, 4, 3)),
        (_move(2, 2, 2, 4), _move(3, 4, 2, 3)),
    ],
)
def test_black_can_capture_en_passant(double_step, capture):
    board = Board()
    board.add_piece(Pawn(Color.BLACK, Square(3, 4)))
    board.move_piece(double_step)
    assert LegalityChecker(board).is_legal(capture) is True


@pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
def test_all_possible_moves_in_opening(color):
    assert len(LegalityChecker(Board()).all_possible_moves(color)) == 20


def test_all_possible_moves_after_move():
    board = Board()
    board.move_piece(_move(5, 2, 5, 4))
    assert len(LegalityChecker(board).all_possible_moves(Color.WHITE)) == 30


def test_all_possible_moves_are_each_legal():
    checker = LegalityChecker(Board())
    moves = checker.all_possible_moves(Color.WHITE)
    assert all(checker.is_legal(move) for move in moves)
    assert _move(2, 1, 3, 3) in moves
    assert _move(5, 2, 5, 4) in moves