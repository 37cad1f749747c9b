"""
Termle - Main Entry Point

Parses command line flags, loads the word lists, and runs the
interactive game in the terminal.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from colorama import just_fix_windows_console

from . import __version__, create_game
from .config import Config
from .controllers.terminal_controller import TerminalController
from .models.errors import WordListError
from .services.word_store import WordStore
from .utils.game_logger import game_logger
from .utils.renderer import BoardRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termle",
        description="Guess the five letter word in six tries."
    )
    parser.add_argument("--day", type=int, default=None,
                        help="select a specific puzzle by day number (default: today)")
    parser.add_argument("--random", action="store_true",
                        help="pick a random puzzle (overrides --day)")
    parser.add_argument("--hard", action="store_true", default=None,
                        help="hard mode: revealed hints must be used in later guesses")
    parser.add_argument("--guesses", metavar="PATH", default=None,
                        help="newline separated list of accepted guesses")
    parser.add_argument("--answers", metavar="PATH", default=None,
                        help="newline separated list of answers, one per day")
    parser.add_argument("--no-clear", action="store_true",
                        help="do not clear the screen between turns")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         config_class=Config) -> int:
    """Main function to load the word lists and play one game."""
    args = build_parser().parse_args(argv)
    just_fix_windows_console()

    try:
        word_store = WordStore.from_files(
            args.guesses or config_class.GUESSES_FILE,
            args.answers or config_class.ANSWERS_FILE
        )
        game = create_game(
            config_class,
            day=args.day,
            use_random=args.random,
            hard_mode=args.hard,
            word_store=word_store
        )
    except WordListError as e:
        game_logger.log_error(e, 'startup', args.day)
        print(f"error: {e}", file=sys.stderr)
        return 1

    renderer = BoardRenderer(clear=config_class.CLEAR_SCREEN and not args.no_clear)
    controller = TerminalController(game, renderer, stdin=stdin, stdout=stdout)

    try:
        controller.run()
    except KeyboardInterrupt:
        game_logger.log_game_event(game.day, 'session_ended', reason='interrupted',
                                   turns_used=game.current_turn)
        print(file=stdout or sys.stdout)
        return 130
    except (OSError, UnicodeDecodeError) as e:
        game_logger.log_error(e, 'read_input', game.day)
        print(f"error: could not read input: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
