"""
Data Models Package

Contains all data models and errors used throughout the application.
"""

from .game import Cell, GameConfig, GameState, GameStatus, LetterStatus
from .errors import (
    TermleError, WordListError, GuessRejected, InvalidFormat, NotInDictionary,
    GameOver, MissingRequiredLetter, WrongFixedPosition
)

__all__ = [
    'Cell', 'GameConfig', 'GameState', 'GameStatus', 'LetterStatus',
    'TermleError', 'WordListError', 'GuessRejected', 'InvalidFormat',
    'NotInDictionary', 'GameOver', 'MissingRequiredLetter', 'WrongFixedPosition'
]
