"""
Board Renderer

Turns game state into colored terminal text. Rendering only builds
strings; the caller decides where to write them.
"""

from typing import Dict, Optional

from colorama import Back, Cursor, Fore, Style
from colorama.ansi import clear_screen

from ..models.game import Cell, GameState, LetterStatus

CELL_STYLES: Dict[LetterStatus, str] = {
    LetterStatus.CORRECT: Fore.WHITE + Back.LIGHTGREEN_EX,
    LetterStatus.PRESENT: Fore.WHITE + Back.LIGHTYELLOW_EX,
    LetterStatus.ABSENT: Fore.WHITE + Back.LIGHTBLACK_EX,
    LetterStatus.UNREVEALED: Fore.BLACK + Back.LIGHTWHITE_EX,
}

KEYBOARD_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

PROMPT = ">"


def paint(text: str, status: LetterStatus) -> str:
    return CELL_STYLES[status] + text + Style.RESET_ALL


class BoardRenderer:
    """Builds the text shown before each prompt and at the end of a game."""

    def __init__(self, clear: bool = True, show_keyboard: bool = True):
        self.clear = clear
        self.show_keyboard = show_keyboard

    def render_cell(self, cell: Cell) -> str:
        return paint(cell.letter, cell.status)

    def render_board(self, state: GameState) -> str:
        lines = []
        for row in state.board:
            lines.append("".join(" " + self.render_cell(cell) for cell in row))
        return "\n".join(lines) + "\n"

    def render_keyboard(self, letter_status: Dict[str, LetterStatus]) -> str:
        lines = []
        for indent, row in enumerate(KEYBOARD_ROWS):
            keys = " ".join(paint(letter, letter_status[letter]) for letter in row)
            lines.append(" " * (indent + 1) + keys)
        return "\n".join(lines) + "\n"

    def render_turn(self, state: GameState, error: Optional[str] = None) -> str:
        """Board, keyboard, optional error line, then the prompt."""
        parts = []
        if self.clear:
            parts.append(clear_screen() + Cursor.POS(1, 1))
        parts.append(self.render_board(state))
        if self.show_keyboard:
            parts.append("\n" + self.render_keyboard(state.letter_status))
        if error:
            parts.append(error + "\n")
        if not state.complete:
            parts.append(PROMPT)
        return "".join(parts)

    def render_result(self, state: GameState, summary: str) -> str:
        """Win or loss text followed by the shareable summary."""
        if state.won:
            lines = ["you won!"]
        else:
            lines = ["you lose!", f"Answer was {state.answer}"]
        lines += ["", summary]
        return "\n".join(lines) + "\n"
