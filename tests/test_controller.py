"""
Testing the controller: the interface the presentation shell calls.
Secret is fixed to 7 by the conftest controller fixture.
"""

import pytest

from numguess.errors import InvalidTransition
from numguess.highscores import HighScoreStore
from numguess.controller import GameController
from numguess.effects import EffectScheduler


def test_guess_without_game_is_a_no_op(controller):
    result = controller.submit_guess("7")
    assert result.outcome.valid is False
    assert result.new_high_score is False


def test_win_records_high_score(controller, score_file):
    controller.start_new_game("easy")
    controller.submit_guess("3")
    result = controller.submit_guess("7")

    assert result.outcome.terminal == "won"
    assert result.new_high_score is True
    assert result.warning is None
    assert HighScoreStore(score_file).load() == {"easy": 2}

    # A slower win does not replace it
    controller.start_new_game("easy")
    for raw in ("1", "2", "3", "7"):
        result = controller.submit_guess(raw)
    assert result.new_high_score is False
    assert controller.store.best("easy") == 2


def test_loss_does_not_record(controller):
    session = controller.start_new_game("easy")
    for _ in range(session.attempt_budget):
        result = controller.submit_guess("1")
    assert result.outcome.terminal == "lost"
    assert controller.store.table() == {}


def test_give_up_reveals_secret_and_never_scores(controller):
    controller.start_new_game("medium")
    controller.submit_guess("50")
    assert controller.give_up() == 7
    assert controller.session.status == "abandoned"
    assert controller.store.table() == {}

    with pytest.raises(InvalidTransition):
        controller.give_up()


def test_give_up_without_game(controller):
    with pytest.raises(InvalidTransition):
        controller.give_up()


def test_existing_scores_are_loaded_on_startup(score_file):
    score_file.write_text("# numguess high scores\nmedium=5\n", encoding="utf-8")
    controller = GameController(HighScoreStore(score_file), picker=lambda n: 1)
    assert controller.store.best("medium") == 5


def test_flash_reverts_unless_a_new_game_started(controller):
    controller.start_new_game("medium")
    controller.submit_guess("9")  # distance 2 -> hot
    assert controller.flash == "hot"

    revert = controller.scheduler.pending[-1]
    assert revert.fire() is True
    assert controller.flash is None

    controller.submit_guess("90")
    assert controller.flash == "cold"
    stale = controller.scheduler.pending[-1]

    controller.start_new_game("hard")
    controller.submit_guess("7")
    assert controller.flash == "won"

    # the revert from the previous game does nothing
    assert stale.fire() is False
    assert controller.flash == "won"


def test_newer_flash_replaces_pending_revert(controller):
    controller.start_new_game("medium")
    controller.submit_guess("9")
    first = controller.scheduler.pending[-1]
    controller.submit_guess("30")

    assert first.fire() is False
    assert controller.flash == "cold"
    assert len(controller.scheduler.pending) == 1


def test_persistence_failure_is_reported_not_raised(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    controller = GameController(HighScoreStore(blocker / "scores.txt"), picker=lambda n: 7)

    controller.start_new_game("easy")
    result = controller.submit_guess("7")
    assert result.new_high_score is True
    assert result.warning is not None
    assert controller.store.best("easy") == 1

    assert controller.reset_high_scores() is not None


class RecordingTimers:
    """Stands in for threading.Timer: remembers every scheduled call."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, fn):
        handle = RecordingHandle(delay, fn)
        self.handles.append(handle)
        return handle


class RecordingHandle:
    def __init__(self, delay, fn):
        self.delay = delay
        self.fn = fn
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


def test_timer_revert_from_old_game_cannot_touch_new_game(store):
    timers = RecordingTimers()
    controller = GameController(
        store,
        picker=lambda n: 7,
        scheduler=EffectScheduler(call_later=timers),
        flash_seconds=0.5,
    )

    controller.start_new_game("medium")
    controller.submit_guess("9")
    assert controller.flash == "hot"
    old_timer = timers.handles[-1]
    assert old_timer.delay == 0.5

    controller.start_new_game("easy")
    assert old_timer.cancelled is True

    controller.submit_guess("8")
    assert controller.flash == "hot"

    # the old timer fires late anyway: nothing changes
    old_timer.fn()
    assert controller.flash == "hot"

    # the current game's own timer still reverts
    timers.handles[-1].fn()
    assert controller.flash is None


def test_slower_win_does_not_repeat_old_save_warning(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    controller = GameController(HighScoreStore(blocker / "scores.txt"), picker=lambda n: 7)

    controller.start_new_game("easy")
    first = controller.submit_guess("7")
    assert first.new_high_score is True
    assert first.warning is not None

    controller.start_new_game("easy")
    controller.submit_guess("1")
    second = controller.submit_guess("7")
    assert second.outcome.terminal == "won"
    assert second.new_high_score is False
    assert second.warning is None
