import io

import pytest

from termle import create_game
from termle.config import TestingConfig
from termle.main import build_parser, main
from termle.services.word_store import WordStore


def run(argv, lines=""):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(lines), stdout=stdout, config_class=TestingConfig)
    return code, stdout.getvalue()


def word_args(word_files):
    guesses, answers = word_files
    return ["--guesses", str(guesses), "--answers", str(answers)]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.day is None
    assert not args.random
    assert args.hard is None
    assert not args.no_clear


def test_play_selected_day(word_files):
    code, output = run(word_args(word_files) + ["--day", "1"], "slate\n")
    assert code == 0
    assert "you won!" in output
    assert "Termle 1 1/6" in output


def test_end_of_input_exits_cleanly(word_files):
    code, output = run(word_args(word_files) + ["--day", "0"], "")
    assert code == 0
    assert "Termle" not in output


def test_hard_flag(word_files):
    code, output = run(word_args(word_files) + ["--day", "0", "--hard"], "trace\nslate\n")
    assert code == 0
    assert "Guess must contain C" in output


def test_random_day_uses_answer_list(tmp_path, word_files):
    guesses, _ = word_files
    answers = tmp_path / "one.txt"
    answers.write_text("ghost\n")
    code, output = run(["--guesses", str(guesses), "--answers", str(answers), "--random"], "ghost\n")
    assert code == 0
    assert "Termle 0 1/6" in output


def test_missing_word_list_is_fatal(tmp_path, capsys):
    code, output = run(["--answers", str(tmp_path / "missing.txt"), "--day", "0"])
    assert code == 1
    assert output == ""
    assert "error: Word list file not found" in capsys.readouterr().err


def test_day_without_answer_is_fatal(word_files, capsys):
    code, _ = run(word_args(word_files) + ["--day", "99"])
    assert code == 1
    assert "No answer for day 99" in capsys.readouterr().err


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert "termle" in capsys.readouterr().out


def test_create_game_uses_config_hard_mode(word_files):
    class HardConfig(TestingConfig):
        HARD_MODE = True

    store = WordStore.from_files(*word_files)
    game = create_game(HardConfig, day=2, word_store=store)
    assert game.hard_mode
    assert game.answer == "GHOST"
    assert not create_game(HardConfig, day=2, hard_mode=False, word_store=store).hard_mode


class FailingInput(io.StringIO):
    def __init__(self, error):
        super().__init__()
        self.error = error

    def readline(self, *args):
        raise self.error


def test_read_error_exits_with_error(word_files, logger, read_log, monkeypatch, capsys):
    monkeypatch.setattr("termle.main.game_logger", logger)
    stdout = io.StringIO()
    code = main(word_args(word_files) + ["--day", "0"], stdin=FailingInput(OSError("broken pipe")),
                stdout=stdout, config_class=TestingConfig)
    assert code == 1
    assert "error: could not read input: broken pipe" in capsys.readouterr().err
    errors = [entry for entry in read_log() if entry["event_type"] == "ERROR"]
    assert errors[0]["action"] == "read_input"


def test_undecodable_input_exits_with_error(word_files, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\xfd\n"), encoding="utf-8")
    code = main(word_args(word_files) + ["--day", "0"], stdin=stdin,
                stdout=io.StringIO(), config_class=TestingConfig)
    assert code == 1
    assert "error: could not read input" in capsys.readouterr().err


def test_ctrl_c_exits_130_and_logs(word_files, logger, read_log, monkeypatch):
    monkeypatch.setattr("termle.main.game_logger", logger)
    code = main(word_args(word_files) + ["--day", "0"], stdin=FailingInput(KeyboardInterrupt()),
                stdout=io.StringIO(), config_class=TestingConfig)
    assert code == 130
    ended = [entry for entry in read_log() if entry["action"] == "session_ended"]
    assert ended[0]["details"]["reason"] == "interrupted"
    assert ended[0]["details"]["turns_used"] == 0
