"""
- HTTP call with clear fallback
Pick the secret number. By default we use Python's secure random generator.
If the random.org source is configured we ask random.org for one integer; if
anything goes wrong (no internet, timeout, bad response) we fall back to the
local generator so the game still starts.
"""

import logging
from secrets import randbelow

import requests

RANDOM_URL = "https://www.random.org/integers/"

logger = logging.getLogger(__name__)


def pick_local(range_max: int) -> int:
    # randbelow(n) gives 0..n-1, so shift by one
    return randbelow(range_max) + 1


def fetch_number(range_max: int, timeout_seconds: float = 3.0) -> int:
    params = {
        "num": 1,            # one secret per game
        "min": 1,
        "max": range_max,
        "col": 1,
        "base": 10,
        "format": "plain",
        "rnd": "new",        # always generate new numbers
    }

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like: "42\n"
        lines = [line.strip() for line in response.text.splitlines() if line.strip()]
        if len(lines) != 1:
            raise ValueError(f"random.org returned {len(lines)} values, expected 1.")

        value = int(lines[0])
        if value < 1 or value > range_max:
            raise ValueError(f"random.org number {value} out of range 1..{range_max}.")
        return value

    except (requests.RequestException, ValueError) as error:
        logger.warning("random.org unavailable (%s); using local random source", error)
        return pick_local(range_max)


def pick_secret(range_max: int, source: str = "local", timeout_seconds: float = 3.0) -> int:
    """Uniform integer in [1, range_max], freshly drawn on every call."""
    if range_max < 1:
        raise ValueError("range_max must be at least 1.")
    if source == "random.org":
        return fetch_number(range_max, timeout_seconds)
    return pick_local(range_max)
