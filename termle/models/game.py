"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status, ordered by how much it reveals."""
    UNREVEALED = "UNREVEALED"
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.UNREVEALED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class Cell:
    """One board position."""
    letter: str
    status: LetterStatus = LetterStatus.UNREVEALED


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to start a game."""
    day: int
    answer: str
    dictionary: FrozenSet[str] = field(repr=False)
    hard_mode: bool = False


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a game handed out to callers."""
    day: int
    current_turn: int
    turns_remaining: int
    max_rounds: int
    complete: bool
    won: bool
    hard_mode: bool
    guesses: Tuple[str, ...]
    board: Tuple[Tuple[Cell, ...], ...]
    letter_status: Dict[str, LetterStatus]
    answer: Optional[str] = None  # Only included when game is over

    @property
    def status(self) -> GameStatus:
        if not self.complete:
            return GameStatus.IN_PROGRESS
        return GameStatus.WON if self.won else GameStatus.LOST
