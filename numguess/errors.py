"""
Error taxonomy for the game core.

None of these is ever fatal: input errors become inline feedback, persistence
errors become soft warnings, and invalid transitions are treated as no-ops.
"""

from typing import Optional


class GameError(Exception):
    """Base class for everything the game core raises."""


class InputError(GameError, ValueError):
    """A guess that is empty, not a number, or outside the current range."""

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind  # "not_a_number" | "out_of_range"


class PersistenceError(GameError):
    """The high-score file could not be read or written."""

    def __init__(self, action: str, path: str, reason: Optional[BaseException] = None):
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"Could not {action} high scores at {path}{detail}")
        self.action = action  # "load" | "save"
        self.path = path
        self.reason = reason


class InvalidTransition(GameError):
    """A state-machine move that is not allowed from the current status."""
