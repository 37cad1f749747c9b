"""
Utilities Package

Contains utility functions, rendering and logging modules.
"""

from .helpers import current_day
from .game_logger import game_logger, GameLogger
from .renderer import BoardRenderer

__all__ = ['current_day', 'game_logger', 'GameLogger', 'BoardRenderer']
