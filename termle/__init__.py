"""
Termle Application Package

A terminal Wordle clone: one hidden five letter word per day, six
guesses, a colored board and a shareable result grid.
"""

from typing import Optional

from .config import Config
from .services.game_service import GameService
from .services.word_store import WordStore
from .utils.helpers import current_day

__version__ = "1.0.0"


def create_game(config_class=Config,
                day: Optional[int] = None,
                use_random: bool = False,
                hard_mode: Optional[bool] = None,
                word_store: Optional[WordStore] = None) -> GameService:
    """
    Factory for creating a game from configuration.

    Args:
        config_class: Configuration class to use
        day: Explicit day number; defaults to today's puzzle
        use_random: Pick a random day instead (overrides day)
        hard_mode: Enable hard mode; defaults to config_class.HARD_MODE
        word_store: Word lists to use; loaded from config_class paths if omitted

    Returns:
        GameService for the selected day

    Raises:
        WordListError: Word lists unreadable or no answer for the day
    """
    if word_store is None:
        word_store = WordStore.from_files(config_class.GUESSES_FILE, config_class.ANSWERS_FILE)

    if use_random:
        day = word_store.random_day()
    elif day is None:
        day = current_day()

    if hard_mode is None:
        hard_mode = config_class.HARD_MODE

    return GameService(word_store.game_config(day, hard_mode))
