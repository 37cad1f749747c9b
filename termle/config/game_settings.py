"""
Game Configuration Constants Module

This module defines all game configuration constants.
All game parameters are centralized here to enable easy modification.
"""

from datetime import datetime, timezone
from typing import Final, Iterable, List

from ..models.errors import WordListError

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

FIRST_DAY: Final[datetime] = datetime(2021, 6, 19, tzinfo=timezone.utc)
"""
Day 0 of the answer list, at UTC midnight.
"""

PLACEHOLDER: Final[str] = "_"


def validate_word_list_integrity(words: Iterable[str],
                                 source: str = "word list",
                                 allow_blank_lines: bool = True) -> List[str]:
    """
    Validates and normalizes a list of words loaded from disk.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only ASCII alphabetic characters allowed
    3. Non-empty validation: At least one word must be present

    Words are converted to uppercase. Blank lines are skipped unless
    allow_blank_lines is False, in which case only trailing blank lines
    are tolerated, so that line N always holds entry N.

    Args:
        words: Raw words, one per entry
        source: Name of the word source, used in error messages
        allow_blank_lines: Skip blank lines instead of rejecting them

    Returns:
        List[str]: Uppercase words in their original order

    Raises:
        WordListError: If any validation check fails
    """
    lines = list(words)
    if not allow_blank_lines:
        while lines and not lines[-1].strip():
            lines.pop()

    uppercase_words = []
    for index, raw in enumerate(lines):
        word = raw.strip().upper()
        if not word:
            if allow_blank_lines:
                continue
            raise WordListError(f"{source}: line {index + 1} is blank")
        if len(word) != WORD_LENGTH:
            raise WordListError(
                f"{source}: word at line {index + 1} '{word}' is not {WORD_LENGTH} characters long"
            )
        if not (word.isascii() and word.isalpha()):
            raise WordListError(
                f"{source}: word at line {index + 1} '{word}' contains non-alphabetic characters"
            )
        uppercase_words.append(word)

    if not uppercase_words:
        raise WordListError(f"{source}: word list cannot be empty")

    return uppercase_words
