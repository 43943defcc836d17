"""
Pure game rules (no HTTP, no storage, no randomness).

- Difficulty policy: which range a tier plays on and how many attempts it gets.
- Guess parsing: raw text from the form -> integer inside the range.
- Feedback: direction (too low / too high) and proximity (hot / warm / cold).

The attempt budget is the number of guesses a perfect binary search needs to
guarantee a win, with a floor of 5 so the smallest range is not too short.
"""

import math
import re

from .errors import InputError
from .types import Comparison, Difficulty, Proximity

RANGE_MAX = {
    "easy": 20,
    "medium": 100,
    "hard": 1000,
}

MIN_ATTEMPTS = 5
DEFAULT_DIFFICULTY: Difficulty = "medium"
DECIMAL = re.compile(r"[+-]?[0-9]+")


def normalize_difficulty(value: str) -> Difficulty:
    """Lower-case known tiers; anything else plays as medium."""
    value = (value or "").strip().lower()
    if value in RANGE_MAX:
        return value  # type: ignore[return-value]
    return DEFAULT_DIFFICULTY


def range_for(difficulty: Difficulty) -> int:
    return RANGE_MAX[difficulty]


def attempt_budget_for(range_max: int) -> int:
    """
    Example:
      range_max = 20   -> ceil(log2(20)) + 1   = 6
      range_max = 100  -> ceil(log2(100)) + 1  = 8
      range_max = 1000 -> ceil(log2(1000)) + 1 = 11
    Never below MIN_ATTEMPTS.
    """
    if range_max < 1:
        raise ValueError("range_max must be at least 1.")
    return max(MIN_ATTEMPTS, math.ceil(math.log2(range_max)) + 1)


def parse_guess(raw: str, range_max: int) -> int:
    """
    Turn the text typed by the player into a guess.
    Raises InputError(kind="not_a_number") or InputError(kind="out_of_range").
    """
    text = (raw or "").strip()
    # plain decimal only: no "1_0", no non-ASCII digits
    if not DECIMAL.fullmatch(text):
        raise InputError("not_a_number", "Please enter a whole number.")
    value = int(text)

    if value < 1 or value > range_max:
        raise InputError("out_of_range", f"Your guess must be between 1 and {range_max}.")
    return value


def compare(secret: int, guess: int) -> Comparison:
    if guess == secret:
        return "correct"
    return "too_low" if guess < secret else "too_high"


def proximity_for(secret: int, guess: int, range_max: int) -> Proximity:
    """
    Thresholds scale with the range (integer division):
      hot  -> distance <= max(1, range_max // 20)
      warm -> distance <= max(2, range_max // 10)
      cold -> anything further
    """
    distance = abs(secret - guess)
    hot_threshold = max(1, range_max // 20)
    warm_threshold = max(2, range_max // 10)

    if distance <= hot_threshold:
        return "hot"
    if distance <= warm_threshold:
        return "warm"
    return "cold"
