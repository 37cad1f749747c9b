"""
Guess Evaluator

Scores a guess against the answer letter by letter.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import LetterStatus


def evaluate_guess(guess: str, answer: str) -> List[LetterStatus]:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their letter from the
    answer's letter budget, so a repeated guess letter is only marked
    PRESENT while unmatched copies remain in the answer.

    Args:
        guess: Uppercase guess
        answer: Uppercase answer of the same length

    Returns:
        List[LetterStatus]: One status per position

    Raises:
        ValueError: If guess and answer differ in length
    """
    if len(guess) != len(answer):
        raise ValueError(f"Guess '{guess}' and answer differ in length")

    remaining = Counter(answer)
    result: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (letter, target) in enumerate(zip(guess, answer)):
        if letter == target:
            result[i] = LetterStatus.CORRECT
            remaining[letter] -= 1

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return result  # type: ignore
