"""
Services Package

Contains all game logic: evaluation, hints, the game state machine and
the word store.
"""

from .evaluator import evaluate_guess
from .hint_service import HintTracker
from .game_service import GameService
from .word_store import WordStore

__all__ = ['evaluate_guess', 'HintTracker', 'GameService', 'WordStore']
