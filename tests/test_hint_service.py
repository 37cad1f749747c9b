import pytest

from termle.models.errors import InvalidFormat, MissingRequiredLetter, WrongFixedPosition
from termle.models.game import LetterStatus
from termle.services.evaluator import evaluate_guess
from termle.services.hint_service import HintTracker


def record(tracker, guess, answer):
    tracker.record(guess, evaluate_guess(guess, answer))


def test_new_tracker_accepts_anything():
    tracker = HintTracker()
    tracker.validate("GHOST")
    assert tracker.yellow_letters == set()
    assert tracker.green_letters == [None] * 5


def test_record_collects_green_and_yellow():
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    assert tracker.green_letters == [None, "R", "A", None, "E"]
    assert tracker.yellow_letters == {"C"}


def test_absent_letters_are_not_recorded():
    tracker = HintTracker()
    tracker.record("GHOST", [LetterStatus.ABSENT] * 5)
    assert tracker.yellow_letters == set()
    assert tracker.green_letters == [None] * 5


def test_green_slots_are_never_unset():
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    record(tracker, "GHOST", "CRANE")
    assert tracker.green_letters == [None, "R", "A", None, "E"]


def test_missing_yellow_letter_rejected():
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    with pytest.raises(MissingRequiredLetter) as excinfo:
        tracker.validate("SRATE")
    assert excinfo.value.letter == "C"
    assert str(excinfo.value) == "Guess must contain C"


def test_moved_green_letter_rejected():
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    with pytest.raises(WrongFixedPosition) as excinfo:
        tracker.validate("REACT")
    assert excinfo.value.position == 1
    assert excinfo.value.letter == "R"
    assert str(excinfo.value) == "2nd letter must be R"


def test_yellow_letters_checked_before_green():
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    with pytest.raises(MissingRequiredLetter):
        tracker.validate("GHOST")


def test_guess_honoring_all_hints_passes():
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    tracker.validate("CRATE")
    tracker.validate("CRANE")


@pytest.mark.parametrize("candidate", ["", "CR", "CRANES"])
def test_wrong_length_candidate_rejected(candidate):
    tracker = HintTracker()
    record(tracker, "TRACE", "CRANE")
    with pytest.raises(InvalidFormat):
        tracker.validate(candidate)
