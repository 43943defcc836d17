"""
What the presentation shell talks to.

- start_new_game(difficulty) -> GameSession
- submit_guess(text) -> GuessResult
- give_up() -> revealed secret
- reset_high_scores() -> PersistenceError | None

Owns exactly one session at a time plus the high-score store. A win is the
only thing that updates high scores; giving up never does.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .effects import EffectScheduler, ScheduledEffect
from .errors import InvalidTransition, PersistenceError
from .highscores import HighScoreStore
from .session import GameSession, GuessOutcome
from .random_client import pick_secret
from .types import Difficulty

logger = logging.getLogger(__name__)


@dataclass
class GuessResult:
    outcome: GuessOutcome
    new_high_score: bool = False
    warning: Optional[str] = None


class GameController:
    def __init__(
        self,
        store: HighScoreStore,
        picker: Callable[[int], int] = pick_secret,
        scheduler: Optional[EffectScheduler] = None,
        flash_seconds: float = 0.8,
    ) -> None:
        self.store = store
        self.picker = picker
        self.scheduler = scheduler or EffectScheduler()
        self.flash_seconds = flash_seconds
        self.session: Optional[GameSession] = None
        # Transient highlight for the latest feedback ("hot", "won", ...)
        self.flash: Optional[str] = None
        self._revert: Optional[ScheduledEffect] = None

        self.store.load()

    def start_new_game(self, difficulty: Difficulty) -> GameSession:
        # Old reverts must not touch the new game
        self.scheduler.invalidate()
        self.flash = None
        self.session = GameSession().start(difficulty, picker=self.picker)
        return self.session

    def submit_guess(self, text: str) -> GuessResult:
        try:
            session = self._require_session()
        except InvalidTransition as error:
            logger.debug("Guess ignored: %s", error)
            return GuessResult(GameSession().evaluate(text))

        outcome = session.evaluate(text)
        result = GuessResult(outcome)

        if outcome.valid:
            self._flash(outcome.terminal if outcome.terminal != "none" else outcome.proximity)

        if outcome.terminal == "won":
            result.new_high_score = self.store.record_if_better(session.difficulty, session.attempts_used)
            if result.new_high_score and self.store.last_error is not None:
                result.warning = str(self.store.last_error)
        return result

    def give_up(self) -> int:
        session = self._require_session()
        if not session.abandon():
            raise InvalidTransition(f"Game already {session.status}.")
        self.scheduler.invalidate()
        self.flash = None
        return session.secret

    def reset_high_scores(self) -> Optional[PersistenceError]:
        return self.store.reset()

    def _require_session(self) -> GameSession:
        if self.session is None:
            raise InvalidTransition("No game has been started.")
        return self.session

    def _flash(self, state: str) -> None:
        if self._revert is not None:
            self._revert.cancel()
        self.flash = state
        generation = self.scheduler.generation

        def _revert() -> None:
            if self.scheduler.generation == generation:
                self.flash = None

        self._revert = self.scheduler.schedule(self.flash_seconds, _revert)
