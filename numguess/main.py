'''
Number guessing game shell

Endpoints:
POST /games?difficulty=easy     -> start a new game (discards the current one)
GET  /games/current             -> read state & history
POST /games/current/guess       -> submit a guess
POST /games/current/give-up     -> quit and reveal the secret

Extras:
GET  /highscores                -> best attempts per difficulty
POST /highscores/reset          -> clear high scores

One player, one game at a time: the process holds a single GameController.
'''

import threading
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends
from fastapi.staticfiles import StaticFiles

from .config import load_settings, configure_logging
from .controller import GameController, GuessResult
from .effects import EffectScheduler
from .engine import normalize_difficulty
from .errors import InvalidTransition
from .highscores import HighScoreStore
from .random_client import pick_secret
from .session import GameSession

from .schemas import (
    GuessRequest,
    GuessResponse,
    GameStateOut,
    GuessEntryOut,
    GiveUpOut,
    HighScoresOut,
)

settings = load_settings()
configure_logging(settings)

app = FastAPI(title="Number Guessing Game", version="1.0.0")


def _timer(delay: float, fn) -> threading.Timer:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    timer.start()
    return timer


@lru_cache(maxsize=1)
def get_controller() -> GameController:
    store = HighScoreStore(settings.highscore_file)
    return GameController(
        store,
        picker=lambda range_max: pick_secret(range_max, settings.random_source, settings.random_timeout),
        scheduler=EffectScheduler(call_later=_timer),
        flash_seconds=settings.flash_seconds,
    )

# --- DTO builders ---

def _to_state(controller: GameController, session: GameSession) -> GameStateOut:
    return GameStateOut(
        difficulty=session.difficulty,
        range_max=session.range_max,
        attempts_used=session.attempts_used,
        attempt_budget=session.attempt_budget,
        attempts_remaining=session.attempts_remaining,
        status=session.status,
        history=[
            GuessEntryOut(guess=h.guess, comparison=h.comparison, proximity=h.proximity)
            for h in session.history
        ],
        best=controller.store.best(session.difficulty),
        flash=controller.flash,
        secret=session.reveal(),
    )

def _to_guess_response(result: GuessResult, session: Optional[GameSession]) -> GuessResponse:
    outcome = result.outcome
    return GuessResponse(
        valid=outcome.valid,
        comparison=outcome.comparison,
        proximity=outcome.proximity,
        attempts_remaining=outcome.attempts_remaining,
        terminal=outcome.terminal,
        guess=outcome.guess,
        message=outcome.message,
        status=session.status if session else None,
        secret=session.reveal() if session else None,
        new_high_score=result.new_high_score,
        warning=result.warning,
    )

def _warning(controller: GameController) -> Optional[str]:
    error = controller.store.last_error
    return str(error) if error is not None else None

# ---------------- Routes ----------------

@app.post("/games", response_model=GameStateOut, summary="Start a new game")
def start_game(
    difficulty: str = "medium",
    controller: GameController = Depends(get_controller),
) -> GameStateOut:
    """
    Difficulty presets:
      easy   -> 1..20,   6 attempts
      medium -> 1..100,  8 attempts
      hard   -> 1..1000, 11 attempts
    Unknown values play as medium.
    """
    session = controller.start_new_game(normalize_difficulty(difficulty))
    return _to_state(controller, session)

@app.get("/games/current", response_model=GameStateOut, summary="Get current game state")
def get_game(controller: GameController = Depends(get_controller)) -> GameStateOut:
    if controller.session is None:
        raise HTTPException(status_code=404, detail="No game started")
    return _to_state(controller, controller.session)

@app.post("/games/current/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    payload: GuessRequest,
    controller: GameController = Depends(get_controller),
) -> GuessResponse:
    # Bad input is feedback, not an HTTP error
    result = controller.submit_guess(payload.guess)
    return _to_guess_response(result, controller.session)

@app.post("/games/current/give-up", response_model=GiveUpOut, summary="Quit and reveal the number")
def give_up(controller: GameController = Depends(get_controller)) -> GiveUpOut:
    try:
        secret = controller.give_up()
    except InvalidTransition as error:
        raise HTTPException(status_code=409, detail=str(error))
    return GiveUpOut(secret=secret)

@app.get("/highscores", response_model=HighScoresOut, summary="Get high scores")
def get_highscores(controller: GameController = Depends(get_controller)) -> HighScoresOut:
    return HighScoresOut(scores=controller.store.table(), warning=_warning(controller))

@app.post("/highscores/reset", response_model=HighScoresOut, summary="Reset high scores")
def reset_highscores(controller: GameController = Depends(get_controller)) -> HighScoresOut:
    error = controller.reset_high_scores()
    return HighScoresOut(scores=controller.store.table(), warning=str(error) if error else None)

# ---- Static hosting for the form ----
STATIC_DIR = Path(__file__).resolve().parent / "static"

app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")
