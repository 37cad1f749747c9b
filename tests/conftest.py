import json
import os
import tempfile

# Keep test runs from writing logs into the working directory
os.environ["TERMLE_LOG_DIR"] = tempfile.mkdtemp(prefix="termle-logs-")
os.environ.pop("TERMLE_GUESSES_FILE", None)
os.environ.pop("TERMLE_ANSWERS_FILE", None)
os.environ.pop("TERMLE_HARD_MODE", None)

import pytest

from termle.models.game import GameConfig
from termle.services.game_service import GameService
from termle.utils.game_logger import GameLogger

WORDS = [
    "CRANE", "TRACE", "SLATE", "CRATE", "REACT", "ALLOT", "LLAMA",
    "ABIDE", "SPEED", "ABBEY", "BOBBY", "MOUND", "PILOT", "GHOST", "FUZZY",
]


@pytest.fixture
def dictionary():
    return frozenset(WORDS)


@pytest.fixture
def make_game(dictionary):
    def _make_game(answer="CRANE", hard_mode=False, day=3):
        return GameService(GameConfig(day=day, answer=answer, dictionary=dictionary,
                                      hard_mode=hard_mode))
    return _make_game


@pytest.fixture
def logger(tmp_path):
    return GameLogger(str(tmp_path / "logs"))


@pytest.fixture
def word_files(tmp_path):
    guesses = tmp_path / "guesses.txt"
    answers = tmp_path / "answers.txt"
    guesses.write_text("\n".join(word.lower() for word in WORDS) + "\n", encoding="utf-8")
    answers.write_text("crane\nslate\nghost\n", encoding="utf-8")
    return guesses, answers


@pytest.fixture
def read_log(logger):
    """Parsed JSON entries written so far by the logger fixture."""
    def _read_log():
        for handler in logger.logger.handlers:
            handler.flush()
        entries = []
        for path in logger.log_dir.glob("game_log_*.log"):
            for line in path.read_text(encoding="utf-8").splitlines():
                entries.append(json.loads(line.split(" | ", 2)[2]))
        return entries
    return _read_log
