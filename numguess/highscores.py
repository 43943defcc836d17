"""
File-backed high scores: fewest attempts needed to win, per difficulty.

Public methods:
- load() -> table
- record_if_better(difficulty, attempts) -> bool
- reset() -> PersistenceError | None
- persist() -> PersistenceError | None
- best(difficulty) / table()

File layout (UTF-8):
    # numguess high scores
    easy=4
    hard=9

Reading and writing never raise. A failure is returned as a PersistenceError
value and kept on last_error; the in-memory table stays authoritative.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .errors import PersistenceError
from .types import DIFFICULTIES, Difficulty, HighScoreTable

HEADER = "# numguess high scores"

logger = logging.getLogger(__name__)


def parse_table(text: str) -> HighScoreTable:
    """Tolerant parser: bad or unknown lines are skipped, not fatal."""
    table: HighScoreTable = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(("#", "!")):
            continue

        # accept "easy=4" and "easy: 4"
        for separator in ("=", ":"):
            if separator in line:
                key, value = line.split(separator, 1)
                break
        else:
            continue

        key = key.strip().lower()
        if key not in DIFFICULTIES:
            continue
        try:
            attempts = int(value.strip())
        except ValueError:
            continue
        if attempts >= 1:
            table[key] = attempts
    return table


def format_table(table: HighScoreTable) -> str:
    lines = [HEADER]
    for difficulty in DIFFICULTIES:
        if difficulty in table:
            lines.append(f"{difficulty}={table[difficulty]}")
    return "\n".join(lines) + "\n"


class HighScoreStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._table: HighScoreTable = {}
        self.last_error: Optional[PersistenceError] = None

    def load(self) -> HighScoreTable:
        """Missing or unreadable file -> empty table."""
        self._table = {}
        self.last_error = None

        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self.table()
        except (OSError, UnicodeDecodeError) as error:
            self.last_error = PersistenceError("load", str(self.path), error)
            logger.warning("%s", self.last_error)
            return self.table()

        self._table = parse_table(text)
        logger.debug("Loaded high scores %s from %s", self._table, self.path)
        return self.table()

    def table(self) -> HighScoreTable:
        return dict(self._table)

    def best(self, difficulty: Difficulty) -> Optional[int]:
        return self._table.get(difficulty)

    def record_if_better(self, difficulty: Difficulty, attempts: int) -> bool:
        self.last_error = None
        if difficulty not in DIFFICULTIES or attempts < 1:
            return False

        current = self._table.get(difficulty)
        if current is not None and attempts >= current:
            return False

        self._table[difficulty] = attempts
        logger.info("New %s high score: %d attempt(s)", difficulty, attempts)
        self.persist()
        return True

    def reset(self) -> Optional[PersistenceError]:
        self._table = {}
        logger.info("High scores reset")
        return self.persist()

    def persist(self) -> Optional[PersistenceError]:
        self.last_error = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(format_table(self._table), encoding="utf-8")
        except OSError as error:
            self.last_error = PersistenceError("save", str(self.path), error)
            logger.warning("%s", self.last_error)
        return self.last_error
