"""The chess board: where the pieces stand and what the last move was."""

from __future__ import annotations

from consolechess.pieces import Piece, make_piece
from consolechess.types import BOARD_SIZE, Color, Move, PieceType, Square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_NO_SQUARE = Square(1, 1)


class Board:
    """A board that starts in the standard opening position."""

    def __init__(self) -> None:
        self._pieces: list[Piece] = []
        self._last_move = Move(_NO_SQUARE, _NO_SQUARE)
        self._non_pawn_moves = 0
        self._non_captures = 0
        self.has_en_passant_square = False
        self.en_passant_square = _NO_SQUARE
        self._set_up_initial_position()

    @classmethod
    def empty(cls) -> Board:
        """A board with every piece of the opening position taken off."""
        board = cls()
        for x in range(1, BOARD_SIZE + 1):
            for y in (1, 2, 7, 8):
                board.remove_piece_at(Square(x, y))
        return board

    def copy(self) -> Board:
        """An independent copy; its pieces are clones of this board's."""
        other = Board.__new__(Board)
        other._pieces = [piece.clone() for piece in self._pieces]
        other._last_move = self._last_move
        other._non_pawn_moves = self._non_pawn_moves
        other._non_captures = self._non_captures
        other.has_en_passant_square = self.has_en_passant_square
        other.en_passant_square = self.en_passant_square
        return other

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """Every piece on the board, in the order they were added."""
        return tuple(self._pieces)

    @property
    def last_move(self) -> Move:
        """The most recent move; a1 to a1 before any move is made."""
        return self._last_move

    def color_pieces(self, color: Color) -> list[Piece]:
        """The pieces of one colour."""
        return [piece for piece in self._pieces if piece.color is color]

    def has_piece_of_color(self, color: Color, square: Square) -> bool:
        """True if a piece of ``color`` stands on ``square``."""
        piece = self.piece_at(square)
        return piece is not None and piece.color is color

    def is_fifty_move_rule(self) -> bool:
        """True once a hundred half-moves passed without capture or pawn move."""
        return self._non_captures > 99 and self._non_pawn_moves > 99

    def add_piece(self, piece: Piece) -> None:
        """Place a piece; raises ValueError if its square is taken."""
        if self.piece_at(piece.position) is not None:
            raise ValueError("there is a piece already on this square")
        self._pieces.append(piece)

    def remove_piece_at(self, square: Square) -> None:
        """Take away whatever piece stands on ``square``; counts as a capture."""
        self._pieces = [p for p in self._pieces if p.position != square]
        self._non_captures = -1

    def move_piece(self, move: Move) -> None:
        """Move the piece on the start square; raises ValueError if none."""
        piece = self.piece_at(move.start)
        if piece is None:
            raise ValueError("there is no piece on this square")
        piece.position = move.end
        piece.has_moved = True
        self._last_move = move

        if piece.piece_type is PieceType.PAWN:
            self._non_pawn_moves = 0
            if abs(move.end.y - move.start.y) == 2:
                self.has_en_passant_square = True
                behind = -1 if piece.color is Color.WHITE else 1
                self.en_passant_square = Square(move.end.x, move.end.y + behind)
            else:
                self._clear_en_passant()
        else:
            self._non_pawn_moves += 1
            self._clear_en_passant()

        self._non_captures += 1

    def castle_kingside(self, color: Color) -> None:
        """Move king and rook of ``color`` to their kingside castled squares."""
        rank = 1 if color is Color.WHITE else 8
        self.move_piece(Move(Square(5, rank), Square(7, rank)))
        self.move_piece(Move(Square(8, rank), Square(6, rank)))

    def castle_queenside(self, color: Color) -> None:
        """Move king and rook of ``color`` to their queenside castled squares."""
        rank = 1 if color is Color.WHITE else 8
        self.move_piece(Move(Square(5, rank), Square(3, rank)))
        self.move_piece(Move(Square(1, rank), Square(4, rank)))

    def piece_at(self, square: Square) -> Piece | None:
        """The piece on ``square``, or None."""
        return next((p for p in self._pieces if p.position == square), None)

    def _clear_en_passant(self) -> None:
        self.has_en_passant_square = False
        self.en_passant_square = _NO_SQUARE

    def _set_up_initial_position(self) -> None:
        for x in range(1, BOARD_SIZE + 1):
            self.add_piece(make_piece(PieceType.PAWN, Color.WHITE, Square(x, 2)))
            self.add_piece(make_piece(PieceType.PAWN, Color.BLACK, Square(x, 7)))
        for color, rank in ((Color.WHITE, 1), (Color.BLACK, 8)):
            for x, piece_type in enumerate(_BACK_RANK, start=1):
                self.add_piece(make_piece(piece_type, color, Square(x, rank)))