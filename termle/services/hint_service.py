"""
Hint Service

Accumulates what past guesses revealed about the answer and enforces
hard-mode constraints on new guesses.
"""

from typing import List, Optional, Sequence, Set

from ..config.game_settings import WORD_LENGTH
from ..models.errors import InvalidFormat, MissingRequiredLetter, WrongFixedPosition
from ..models.game import LetterStatus


class HintTracker:
    """
    Tracks letters known to be in the answer.

    yellow_letters holds letters revealed as present somewhere;
    green_letters[i] holds the letter revealed as correct at position i.
    A green slot, once set, never changes.
    """

    def __init__(self, word_length: int = WORD_LENGTH):
        self.yellow_letters: Set[str] = set()
        self.green_letters: List[Optional[str]] = [None] * word_length

    def record(self, guess: str, evaluation: Sequence[LetterStatus]) -> None:
        """Fold one scored guess into the hints."""
        for i, (letter, status) in enumerate(zip(guess, evaluation)):
            if status == LetterStatus.CORRECT:
                self.green_letters[i] = letter
            elif status == LetterStatus.PRESENT:
                self.yellow_letters.add(letter)

    def validate(self, candidate: str) -> None:
        """
        Checks a candidate guess against the hints gathered so far.

        Raises:
            InvalidFormat: The candidate is not the length of the answer
            MissingRequiredLetter: A present letter is missing from the candidate
            WrongFixedPosition: A correct letter is not repeated at its position
        """
        if len(candidate) != len(self.green_letters):
            raise InvalidFormat()

        for letter in sorted(self.yellow_letters):
            if letter not in candidate:
                raise MissingRequiredLetter(letter)

        for position, letter in enumerate(self.green_letters):
            if letter is not None and candidate[position] != letter:
                raise WrongFixedPosition(position, letter)
