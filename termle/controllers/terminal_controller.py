"""
Terminal Controller

Runs the interactive loop: one line of input per turn, render, repeat.
"""

import sys
from typing import Optional, TextIO

from ..models.errors import GuessRejected
from ..models.game import GameState
from ..services.game_service import GameService
from ..utils.game_logger import GameLogger, game_logger
from ..utils.renderer import BoardRenderer


class TerminalController:
    """
    Drives one game from a text stream.

    Rejected guesses are shown inline and re-prompted without using a
    turn. End of input stops the session without printing a summary.
    """

    def __init__(self,
                 game: GameService,
                 renderer: Optional[BoardRenderer] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 logger: Optional[GameLogger] = None):
        self.game = game
        self.renderer = renderer or BoardRenderer()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.logger = logger or game_logger

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def run(self) -> GameState:
        """
        Play until the game completes or input runs out.

        Returns:
            The final GameState

        Raises:
            OSError: Reading input failed
            UnicodeDecodeError: Input was not valid text
        """
        day = self.game.day
        state = self.game.get_game_state()

        self.logger.log_game_event(day, 'game_started', hard_mode=self.game.hard_mode)
        self._write(self.renderer.render_turn(state))

        while True:
            line = self.stdin.readline()
            if not line:
                self.logger.log_game_event(
                    day, 'session_ended', reason='end_of_input', turns_used=state.current_turn
                )
                self._write("\n")
                return state

            guess = line.strip()
            try:
                state = self.game.submit_guess(guess)
            except GuessRejected as e:
                self.logger.log_rejection(day, guess, e, turn=state.current_turn)
                self._write(self.renderer.render_turn(state, str(e)))
                continue

            self.logger.log_user_action(
                'submit_guess', day, guess=guess.upper(), turn=state.current_turn,
                turns_remaining=state.turns_remaining
            )
            self._write(self.renderer.render_turn(state))

            if state.complete:
                event = 'game_won' if state.won else 'game_lost'
                self.logger.log_game_event(
                    day, event, rounds_used=state.current_turn, target_word=state.answer,
                    hard_mode=state.hard_mode
                )
                self._write(self.renderer.render_result(state, self.game.shareable_summary()))
                return state
