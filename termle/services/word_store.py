"""
Word Store

Loads the accepted-guess dictionary and the day-indexed answer list.
"""

import random
from importlib.resources import files
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence, Union

from ..config.game_settings import validate_word_list_integrity
from ..models.errors import WordListError
from ..models.game import GameConfig

PathLike = Union[str, Path]


def _read_lines(path: Optional[PathLike], bundled_name: str) -> List[str]:
    """
    Read a newline-delimited word file.

    Args:
        path: File to read, or None for the list bundled with the package
        bundled_name: Name of the bundled file under termle/data

    Raises:
        WordListError: If the file is missing or unreadable
    """
    if path is None:
        source = files("termle") / "data" / bundled_name
    else:
        source = Path(path)

    try:
        return source.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        raise WordListError(f"Word list file not found: {source}")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not read word list {source}: {e}")


class WordStore:
    """
    Holds the accepted guesses and the answer list.

    Answers are indexed by day number, starting at 0. Every answer is
    also an accepted guess.
    """

    def __init__(self, guesses: Iterable[str], answers: Sequence[str]):
        self.answers: List[str] = [word.upper() for word in answers]
        self.dictionary: FrozenSet[str] = frozenset(word.upper() for word in guesses) | frozenset(self.answers)

    @classmethod
    def from_files(cls,
                   guesses_path: Optional[PathLike] = None,
                   answers_path: Optional[PathLike] = None) -> "WordStore":
        """Load and validate both word lists."""
        guesses = validate_word_list_integrity(
            _read_lines(guesses_path, "guesses.txt"), str(guesses_path or "guesses.txt"))
        answers = validate_word_list_integrity(
            _read_lines(answers_path, "answers.txt"), str(answers_path or "answers.txt"),
            allow_blank_lines=False)
        return cls(guesses, answers)

    @property
    def answer_count(self) -> int:
        return len(self.answers)

    def answer_for_day(self, day: int) -> str:
        """
        Returns the answer for a day.

        Raises:
            WordListError: If no answer exists for that day
        """
        if not 0 <= day < self.answer_count:
            raise WordListError(
                f"No answer for day {day}; known days are 0 to {self.answer_count - 1}"
            )
        return self.answers[day]

    def random_day(self, rng: Optional[random.Random] = None) -> int:
        """Pick a uniformly random day with a known answer."""
        return (rng or random).randrange(self.answer_count)

    def game_config(self, day: int, hard_mode: bool = False) -> GameConfig:
        """Build the configuration for a game on the given day."""
        return GameConfig(
            day=day,
            answer=self.answer_for_day(day),
            dictionary=self.dictionary,
            hard_mode=hard_mode
        )
