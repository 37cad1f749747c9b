"""
Game Service

Contains the core game logic: turn progression, board history,
hard-mode enforcement and the shareable result grid.
"""

import re
from string import ascii_uppercase
from typing import Dict, List

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH, PLACEHOLDER
from ..models.errors import GameOver, InvalidFormat, NotInDictionary
from ..models.game import Cell, GameConfig, GameState, GameStatus, LetterStatus
from .evaluator import evaluate_guess
from .hint_service import HintTracker

VALID_GUESS = re.compile(rf"[A-Za-z]{{{WORD_LENGTH}}}")

SHARE_SQUARES = {
    LetterStatus.ABSENT: "\u2b1b",  # black square
    LetterStatus.PRESENT: "\U0001f7e8",  # yellow square
    LetterStatus.CORRECT: "\U0001f7e9",  # green square
}


class GameService:
    """
    A single game session.

    This class handles:
    - Guess validation (format, dictionary, hard-mode hints)
    - Guess evaluation and board updates
    - Win/loss detection
    - Keyboard letter status tracking

    Rejected guesses raise a GuessRejected subclass and leave the game
    untouched.
    """

    def __init__(self, config: GameConfig, max_rounds: int = MAX_ROUNDS):
        if not VALID_GUESS.fullmatch(config.answer):
            raise ValueError(f"Answer must be {WORD_LENGTH} letters, got '{config.answer}'")
        answer = config.answer.upper()

        self.day = config.day
        self.hard_mode = config.hard_mode
        self.answer = answer
        self.dictionary = config.dictionary
        self.max_rounds = max_rounds

        self.current_turn = 0
        self.turns_remaining = max_rounds
        self.complete = False
        self.won = False
        self.guesses: List[str] = []
        self.evaluations: List[List[LetterStatus]] = []
        self.board: List[List[Cell]] = [
            [Cell(PLACEHOLDER) for _ in range(WORD_LENGTH)] for _ in range(max_rounds)
        ]
        self.hints = HintTracker(WORD_LENGTH)
        self.letter_status: Dict[str, LetterStatus] = {
            letter: LetterStatus.UNREVEALED for letter in ascii_uppercase
        }

    def is_complete(self) -> bool:
        return self.complete

    def did_win(self) -> bool:
        return self.won

    def status(self) -> GameStatus:
        if not self.complete:
            return GameStatus.IN_PROGRESS
        return GameStatus.WON if self.won else GameStatus.LOST

    def validate_guess(self, raw: str) -> str:
        """
        Validates a guess without changing the game.

        The format is checked on the text as typed, before upper-casing,
        so only ASCII letters count towards the five.

        Returns:
            str: The guess, stripped and upper-cased

        Raises:
            GameOver: The game has already finished
            InvalidFormat: Not exactly five letters
            NotInDictionary: Not an accepted word
            MissingRequiredLetter, WrongFixedPosition: Hard-mode violations
        """
        if self.complete:
            raise GameOver()

        text = raw.strip()
        if not VALID_GUESS.fullmatch(text):
            raise InvalidFormat()

        guess = text.upper()
        if guess not in self.dictionary:
            raise NotInDictionary()

        if self.hard_mode:
            self.hints.validate(guess)

        return guess

    def submit_guess(self, raw: str) -> GameState:
        """
        Processes a guess and updates game state.

        Args:
            raw: The guess as typed; surrounding whitespace and case are ignored

        Returns:
            The updated GameState

        Raises:
            GuessRejected: The guess was refused and no turn was used
        """
        guess = self.validate_guess(raw)

        evaluation = evaluate_guess(guess, self.answer)

        self.board[self.current_turn] = [
            Cell(letter, status) for letter, status in zip(guess, evaluation)
        ]
        self.guesses.append(guess)
        self.evaluations.append(evaluation)
        self.hints.record(guess, evaluation)
        self._update_letter_status(guess, evaluation)

        self.turns_remaining -= 1
        self.current_turn += 1

        if guess == self.answer:
            self.won = True
            self.complete = True
        elif self.turns_remaining == 0:
            self.complete = True

        return self.get_game_state()

    def _update_letter_status(self, guess: str, evaluation: List[LetterStatus]) -> None:
        """
        Updates keyboard letter status based on guess results.
        Status can only progress in priority order.
        """
        for letter, new_status in zip(guess, evaluation):
            if new_status.rank > self.letter_status[letter].rank:
                self.letter_status[letter] = new_status

    def get_game_state(self) -> GameState:
        """
        Returns the current game state (without revealing the answer
        until the game is over).
        """
        return GameState(
            day=self.day,
            current_turn=self.current_turn,
            turns_remaining=self.turns_remaining,
            max_rounds=self.max_rounds,
            complete=self.complete,
            won=self.won,
            hard_mode=self.hard_mode,
            guesses=tuple(self.guesses),
            board=tuple(tuple(row) for row in self.board),
            letter_status=self.letter_status.copy(),
            answer=self.answer if self.complete else None
        )

    def shareable_summary(self) -> str:
        """
        Builds the copyable result: a header with the day and score
        followed by one row of colored squares per guess, without letters.
        """
        score = str(self.current_turn) if self.won else "X"
        header = f"Termle {self.day} {score}/{self.max_rounds}"
        if self.hard_mode:
            header += "*"

        rows = [
            "".join(SHARE_SQUARES[status] for status in evaluation)
            for evaluation in self.evaluations
        ]
        return "\n".join([header, ""] + rows)
