"""
Game Errors

Exceptions raised by the game. In-game rejections derive from
GuessRejected and never consume a turn; WordListError is a fatal
startup error raised before any game exists.
"""


class TermleError(Exception):
    """Base class for all game errors."""


class WordListError(TermleError):
    """A word list could not be read or is malformed."""


class GuessRejected(TermleError):
    """A submitted guess was refused; the turn is not consumed."""

    message = "Guess rejected"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class InvalidFormat(GuessRejected):
    message = "Please enter a 5 letter word"


class NotInDictionary(GuessRejected):
    message = "Not in word list"


class GameOver(GuessRejected):
    message = "Game is already over"


class MissingRequiredLetter(GuessRejected):
    """Hard mode: a letter revealed as present is missing from the guess."""

    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"Guess must contain {letter}")


class WrongFixedPosition(GuessRejected):
    """Hard mode: a letter revealed as correct was moved or replaced."""

    def __init__(self, position: int, letter: str):
        self.position = position
        self.letter = letter
        super().__init__(f"{_ordinal(position + 1)} letter must be {letter}")


def _ordinal(n: int) -> str:
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n if n < 20 else n % 10, "th")
    return f"{n}{suffix}"
