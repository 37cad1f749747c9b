"""
Game Logger Module for Termle

This module provides structured logging for player actions, rejected
guesses, game events and errors. Logs go to a daily file only, since the
terminal itself is taken by the game board.
"""

import logging
import json
import uuid
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the game.

    Features:
    - Player action tracking per session
    - Rejected guess logging with the rejection reason
    - Game event logging (start, win, loss, end of input)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO
        self.session_id = str(uuid.uuid4())

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the game logger with a file handler."""
        logger = logging.getLogger('termle')
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            # Unwritable log directory
            logger.addHandler(logging.NullHandler())
            return logger

        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        # File handler for detailed logs, opened on first write
        file_handler = logging.FileHandler(log_file, encoding='utf-8', delay=True)
        file_handler.setLevel(self.level)

        # JSON entries behind a readable prefix
        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'session_id': self.session_id,
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self,
                        action: str,
                        day: Optional[int] = None,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g., 'submit_guess')
            day: Day number of the game if applicable
            **kwargs: Additional details to log
        """
        details = {'day': day, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_rejection(self,
                      day: int,
                      guess: str,
                      error: Exception,
                      **kwargs):
        """
        Log a refused guess and why it was refused.

        Args:
            day: Day number of the game
            guess: The guess as typed
            error: The GuessRejected raised for it
        """
        details = {
            'day': day,
            'guess': guess,
            'reason': type(error).__name__,
            'message': str(error),
            **kwargs
        }
        self.logger.info(self._create_log_entry('GUESS_REJECTED', 'submit_guess', details))

    def log_game_event(self,
                       day: int,
                       event: str,
                       **kwargs):
        """
        Log game-specific events (start, wins, losses, etc.).

        Args:
            day: Day number of the game
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {'day': day, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  day: Optional[int] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            day: Day number of the game if applicable
        """
        details = {
            'day': day,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
