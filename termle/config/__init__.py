"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, TestingConfig
from .game_settings import (
    MAX_ROUNDS, WORD_LENGTH, FIRST_DAY, PLACEHOLDER,
    validate_word_list_integrity
)

__all__ = [
    # Runtime configuration
    'Config', 'TestingConfig',
    # Game rules
    'MAX_ROUNDS', 'WORD_LENGTH', 'FIRST_DAY', 'PLACEHOLDER',
    'validate_word_list_integrity'
]
