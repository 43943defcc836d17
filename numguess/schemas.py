"""
Explicit validation & Pydantic models
- Defines the structure of API requests and responses for the game shell.
- The secret is only ever serialized once a game is finished.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from .types import GameStatus

# 1. Player's guess: raw text from the form; the game core does the parsing
class GuessRequest(BaseModel):
    guess: str = Field("", description="Whatever the player typed. Parsed and range-checked by the game.")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "42"},
                {"guess": "abc"},   # comes back as not_a_number, no attempt used
            ]
        }
    }

# 2. One valid guess in the history
class GuessEntryOut(BaseModel):
    guess: int = Field(..., description="The player's guess")
    comparison: Literal["correct", "too_low", "too_high"] = Field(..., description="Direction feedback")
    proximity: Literal["hot", "warm", "cold", "not_applicable"] = Field(..., description="Closeness feedback")

# 3. Overall state of the current game
class GameStateOut(BaseModel):
    difficulty: Literal["easy", "medium", "hard"] = Field(..., description="Chosen difficulty level")
    range_max: int = Field(..., description="The secret is between 1 and this number")
    attempts_used: int = Field(..., description="Valid guesses made so far")
    attempt_budget: int = Field(..., description="Guesses allowed in total")
    attempts_remaining: int = Field(..., description="How many guesses remain")
    status: GameStatus = Field(..., description="Current state of the game")
    history: List[GuessEntryOut] = Field(default_factory=list, description="All valid guesses with feedback")
    best: Optional[int] = Field(None, description="High score for this difficulty, if any")
    flash: Optional[str] = Field(None, description="Transient highlight for the latest feedback")
    secret: Optional[int] = Field(None, description="Only revealed once the game is over")

# 4. Result of one guess
class GuessResponse(BaseModel):
    valid: bool = Field(..., description="False for bad input or when no game is in progress")
    comparison: Optional[Literal["correct", "too_low", "too_high", "out_of_range", "not_a_number"]] = Field(
        None, description="None when no game was in progress"
    )
    proximity: Literal["hot", "warm", "cold", "not_applicable"] = Field(..., description="Closeness feedback")
    attempts_remaining: int = Field(..., description="How many guesses remain")
    terminal: Literal["none", "won", "lost"] = Field("none", description="Set when this guess ended the game")
    guess: Optional[int] = Field(None, description="The parsed guess; None when the input was not a number")
    message: str = Field("", description="Feedback text for the player")
    status: Optional[GameStatus] = Field(None, description="Game status after this guess")
    secret: Optional[int] = Field(None, description="Revealed once the game is over")
    new_high_score: bool = Field(False, description="This win beat the stored record")
    warning: Optional[str] = Field(None, description="Non-fatal problem, ex. high scores could not be saved")

# 5. Give up
class GiveUpOut(BaseModel):
    secret: int = Field(..., description="The number the player was looking for")
    status: Literal["abandoned"] = "abandoned"

# 6. High score table
class HighScoresOut(BaseModel):
    scores: Dict[str, int] = Field(default_factory=dict, description="difficulty -> fewest attempts to win")
    warning: Optional[str] = Field(None, description="Non-fatal problem reading or writing the file")
