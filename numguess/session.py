"""
One play-through of the game.

States:
  not_started -> in_progress -> won | lost | abandoned

A finished session never goes back to in_progress; the caller builds a new one.
evaluate() never raises: bad input comes back as an outcome with valid=False.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .engine import attempt_budget_for, compare, parse_guess, proximity_for, range_for
from .errors import InputError, InvalidTransition
from .random_client import pick_secret
from .types import Comparison, Difficulty, GameStatus, Proximity, Terminal, FINISHED_STATUSES

logger = logging.getLogger(__name__)

SecretPicker = Callable[[int], int]


@dataclass
class GuessOutcome:
    valid: bool
    comparison: Optional[Comparison]   # None when the session was not in progress
    proximity: Proximity
    attempts_remaining: int
    terminal: Terminal = "none"
    guess: Optional[int] = None
    message: str = ""


@dataclass
class GuessEntry:
    guess: int
    comparison: Comparison
    proximity: Proximity


@dataclass
class GameSession:
    difficulty: Difficulty = "medium"
    secret: int = 0
    range_max: int = 0
    attempts_used: int = 0
    attempt_budget: int = 0
    status: GameStatus = "not_started"
    history: List[GuessEntry] = field(default_factory=list)

    @property
    def attempts_remaining(self) -> int:
        return max(0, self.attempt_budget - self.attempts_used)

    @property
    def in_progress(self) -> bool:
        return self.status == "in_progress"

    @property
    def finished(self) -> bool:
        return self.status in FINISHED_STATUSES

    def start(
        self,
        difficulty: Difficulty,
        secret: Optional[int] = None,
        picker: SecretPicker = pick_secret,
    ) -> "GameSession":
        if self.status != "not_started":
            raise InvalidTransition(f"Cannot start a session that is already {self.status}.")

        range_max = range_for(difficulty)
        if secret is None:
            secret = picker(range_max)
        if secret < 1 or secret > range_max:
            raise ValueError(f"Secret {secret} is outside 1..{range_max}.")

        self.difficulty = difficulty
        self.range_max = range_max
        self.attempt_budget = attempt_budget_for(range_max)
        self.secret = secret
        self.attempts_used = 0
        self.history = []
        self.status = "in_progress"

        logger.info("New %s game: 1..%d, %d attempts", difficulty, range_max, self.attempt_budget)
        logger.debug("Secret is %d", secret)
        return self

    def evaluate(self, raw: str) -> GuessOutcome:
        if not self.in_progress:
            return GuessOutcome(
                valid=False,
                comparison=None,
                proximity="not_applicable",
                attempts_remaining=self.attempts_remaining,
                message="No game in progress. Start a new game.",
            )

        try:
            guess = parse_guess(raw, self.range_max)
        except InputError as error:
            # Not in the game at all: no attempt is used
            return GuessOutcome(
                valid=False,
                comparison=error.kind,  # type: ignore[arg-type]
                proximity="not_applicable",
                attempts_remaining=self.attempts_remaining,
                message=str(error),
            )

        self.attempts_used += 1
        comparison = compare(self.secret, guess)

        if comparison == "correct":
            self.status = "won"
            self.history.append(GuessEntry(guess, comparison, "not_applicable"))
            logger.info("Won %s game in %d attempt(s)", self.difficulty, self.attempts_used)
            return GuessOutcome(
                valid=True,
                comparison=comparison,
                proximity="not_applicable",
                attempts_remaining=self.attempts_remaining,
                terminal="won",
                guess=guess,
                message=f"Correct! You got it in {self.attempts_used} attempt(s).",
            )

        proximity = proximity_for(self.secret, guess, self.range_max)
        self.history.append(GuessEntry(guess, comparison, proximity))
        direction = "Too low" if comparison == "too_low" else "Too high"

        terminal: Terminal = "none"
        if self.attempts_used >= self.attempt_budget:
            self.status = "lost"
            terminal = "lost"
            message = f"{direction}. Out of attempts! The number was {self.secret}."
            logger.info("Lost %s game after %d attempt(s)", self.difficulty, self.attempts_used)
        else:
            message = f"{direction} ({proximity}). {self.attempts_remaining} attempt(s) left."
            logger.debug("Guess %d: %s, %s", guess, comparison, proximity)

        return GuessOutcome(
            valid=True,
            comparison=comparison,
            proximity=proximity,
            attempts_remaining=self.attempts_remaining,
            terminal=terminal,
            guess=guess,
            message=message,
        )

    def abandon(self) -> bool:
        """Player quit. Not a loss, and never scored."""
        if not self.in_progress:
            return False
        self.status = "abandoned"
        logger.info("Abandoned %s game after %d attempt(s)", self.difficulty, self.attempts_used)
        return True

    def reveal(self) -> Optional[int]:
        """Return the secret ONLY for finished sessions; else None."""
        if self.finished:
            return self.secret
        return None
