# consolechess

A two-player chess game played in the terminal. White and Black take turns
typing moves on the same keyboard. Each move is checked, and the game ends on
checkmate, stalemate or the fifty-move rule.

## Installing

    pip install .

## Playing

    consolechess

Before each move the game prints the move history so far, as numbered pairs,
and asks for the next move:

    Move history:
    1. e2e4 e7e5

    Black to move, insert your Move:

Type moves in coordinate notation. Moves can be separated by spaces or
newlines.

| Input    | Meaning                                       |
|----------|-----------------------------------------------|
| `e2e4`   | move the piece on e2 to e4                    |
| `e7e8=Q` | promote a pawn; `N`, `B`, `R` or `Q` allowed  |
| `0-0`    | castle kingside                               |
| `0-0-0`  | castle queenside                              |

Castling uses the digit zero, not the letter O. A promotion suffix is only
accepted on a move that ends on the first or eighth rank.

The game turns down a move, says why, and asks again, when the move:

- is not well formed,
- is not legal for that piece,
- moves a piece of the other colour,
- leaves your own king in check,
- is a castle that the rules do not allow. You cannot castle while in check,
  across or onto an attacked square, through pieces, or with a king or rook
  that has already moved.

A pawn that reaches the last rank without a promotion suffix becomes a queen.

When the side to move has no move that keeps its king safe, the game prints
the history and `Checkmate!` or `Stalemate!`. After a hundred half-moves with
no capture and no pawn move it prints `Draw caused by fifty-move rule!`.

The command exits with status 0 when the game ends and 1 if the input runs out
or is interrupted first.

## What it does not do

- It never draws the board; players follow the position from the move history.
- There is no computer opponent, no clock, and no way to save, load or undo a
  game.
- Draws by repetition, by insufficient material or by agreement are not
  detected, and there is no resignation.
- An en passant capture is accepted as a legal move, but the pawn that was
  passed is not taken off the board.

## Using the library

The rules can be used without the console game:

```python
from consolechess.board import Board
from consolechess.legality import LegalityChecker
from consolechess.notation import parse_move
from consolechess.types import Color

board = Board()
move = parse_move("e2e4")
if LegalityChecker(board).is_legal(move):
    board.move_piece(move)

print(len(LegalityChecker(board).all_possible_moves(Color.WHITE)))
```

The modules:

- `consolechess.types`: `Color`, `PieceType`, `Square` (file and rank, 1 to 8;
  `ValueError` outside that) and `Move`.
- `consolechess.pieces`: `Pawn`, `Knight`, `Bishop`, `Rook`, `Queen`, `King`
  with `possible_moves()` on an empty board, and `make_piece()`.
- `consolechess.geometry`: move direction tests and the squares a move passes
  over.
- `consolechess.board.Board`: the opening position (or `Board.empty()`),
  `piece_at`, `add_piece`, `remove_piece_at`, `move_piece`, castling, the last
  move, the en passant square and the fifty-move count.
- `consolechess.legality.LegalityChecker`: whether a move obeys the piece's
  movement rules, whether it captures, and every such move for a colour.
- `consolechess.danger.DangerChecker`: whether a side's king or a given square
  is attacked; raises `NoKingError` when the side has no king.
- `consolechess.castling.CastleChecker`: whether a side may castle on either
  wing.
- `consolechess.check.CheckChecker`: whether a move leaves the king safe, and
  whether every move leaves it attacked (mate or stalemate).
- `consolechess.notation`: `is_valid_move_string()` and `parse_move()`.
- `consolechess.dialog.MoveDialog`: the move history, whose turn it is, and the
  game's messages, written to a given stream or to standard output.
- `consolechess.game`: `play(read_move, dialog)` runs a whole game with any
  callable that returns move strings and returns a `GameResult`;
  `is_promotion()` and the `main()` behind the command.

Checkers take a copy of the board when they are made, so later changes to the
board are not seen by them.

## Running the tests

    pip install ".[test]"
    pytest