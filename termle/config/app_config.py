"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a .env file, if present
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class with all settings."""

    # Logging Settings
    LOG_LEVEL = os.getenv('TERMLE_LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('TERMLE_LOG_DIR', 'logs')

    # Word List Settings (None means the lists bundled with the package)
    GUESSES_FILE = os.getenv('TERMLE_GUESSES_FILE')
    ANSWERS_FILE = os.getenv('TERMLE_ANSWERS_FILE')

    # Game Settings
    HARD_MODE = _env_flag('TERMLE_HARD_MODE', 'False')

    # Terminal Settings
    CLEAR_SCREEN = _env_flag('TERMLE_CLEAR_SCREEN', 'True')


class TestingConfig(Config):
    """Testing configuration."""
    CLEAR_SCREEN = False
    GUESSES_FILE = None
    ANSWERS_FILE = None
