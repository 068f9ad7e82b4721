"""Text shown to the players: prompts, move history and messages."""

from __future__ import annotations

import sys
from typing import TextIO

from consolechess.types import Color


class MoveDialog:
    """Keeps the move history and writes the game's messages to a stream.

    Output goes to ``out``, or to the current standard output when no
    stream is given.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._history: list[str] = []

    @property
    def history(self) -> tuple[str, ...]:
        """The move strings recorded so far, in order."""
        return tuple(self._history)

    def record_move(self, move_text: str) -> None:
        """Add a played move to the history; the turn passes to the other side."""
        self._history.append(move_text)

    def current_turn(self) -> Color:
        """The colour whose turn it is."""
        return Color.WHITE if len(self._history) % 2 == 0 else Color.BLACK

    def move_history_text(self) -> str:
        """The history as numbered move pairs, or an empty string before any move."""
        if not self._history:
            return ""
        lines = [
            f"\n{number}." + "".join(f" {move}" for move in self._history[i:i + 2])
            for number, i in enumerate(range(0, len(self._history), 2), start=1)
        ]
        return "\nMove history:" + "".join(lines) + "\n\n"

    def prompt_text(self) -> str:
        """The one-line prompt asking the side to move for a move."""
        side = "White" if self.current_turn() is Color.WHITE else "Black"
        return f"{side} to move, insert your Move: "

    def show_dialog(self) -> None:
        """Write the history followed by the prompt."""
        self._say(self.move_history_text() + self.prompt_text())

    def show_move_history(self) -> None:
        """Write the history alone."""
        self._say(self.move_history_text())

    def show_string_not_valid(self) -> None:
        self._say("The move string is not valid! Please try again\n")

    def show_move_not_legal(self) -> None:
        self._say("The move you are trying to play is not legal! Please try again\n")

    def show_piece_wrong_color(self) -> None:
        self._say("You are trying to move a piece of the wrong color! Please try again\n")

    def show_checkmate(self) -> None:
        self._say("Checkmate!\n")

    def show_stalemate(self) -> None:
        self._say("Stalemate!\n")

    def show_fifty_move_draw(self) -> None:
        self._say("Draw caused by fifty-move rule!\n")

    def show_move_puts_king_in_check(self) -> None:
        self._say("This move will put your king in check! Please try again\n")

    def show_illegal_castling(self) -> None:
        self._say("Attempted castle move is illegal! Please try again\n")

    def _say(self, text: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        print(text, file=stream)