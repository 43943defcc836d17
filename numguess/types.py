"""
Labels for clarity.
"""

from typing import Dict, Literal

Difficulty = Literal["easy", "medium", "hard"]
GameStatus = Literal["not_started", "in_progress", "won", "lost", "abandoned"]
Comparison = Literal["correct", "too_low", "too_high", "out_of_range", "not_a_number"]
Proximity = Literal["hot", "warm", "cold", "not_applicable"]
Terminal = Literal["none", "won", "lost"]
HighScoreTable = Dict[str, int]  # difficulty -> fewest attempts to win

DIFFICULTIES = ("easy", "medium", "hard")
FINISHED_STATUSES = ("won", "lost", "abandoned")
