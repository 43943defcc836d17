"""
- Point the high-score file at a temp dir so tests never touch the real one
- Provide a controller whose secret is always known (no randomness)
- Provide a client fixture (TestClient(app)) that already uses that controller
"""
import os
import pytest

from fastapi.testclient import TestClient

# Never reach out to random.org from the test suite
os.environ.setdefault("NUMGUESS_RANDOM_SOURCE", "local")

from numguess.controller import GameController
from numguess.highscores import HighScoreStore
from numguess.main import app, get_controller

# 7 is inside every range (easy is 1..20)
FIXED_SECRET = 7


@pytest.fixture
def score_file(tmp_path):
    return tmp_path / "highscores.txt"


@pytest.fixture
def store(score_file) -> HighScoreStore:
    return HighScoreStore(score_file)


@pytest.fixture
def controller(store) -> GameController:
    return GameController(store, picker=lambda range_max: FIXED_SECRET)


@pytest.fixture
def client(controller):
    """Force the app to use our controller for every request."""
    app.dependency_overrides[get_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()
