"""
Single place to:
- Read settings from env (a local .env is loaded if present)
- Configure logging for the whole process

Malformed numbers fall back to the defaults instead of crashing the game.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number); using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    highscore_file: Path
    random_source: str = "local"      # "local" | "random.org"
    random_timeout: float = 3.0       # seconds
    flash_seconds: float = 0.8        # how long feedback stays highlighted
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT


def load_settings() -> Settings:
    # dev convenience; a real install just sets env vars
    load_dotenv()

    highscore_file = os.getenv("NUMGUESS_HIGHSCORE_FILE") or str(Path.home() / ".numguess_highscores")
    return Settings(
        highscore_file=Path(highscore_file).expanduser(),
        random_source=os.getenv("NUMGUESS_RANDOM_SOURCE", "local").strip().lower(),
        random_timeout=_float_env("NUMGUESS_RANDOM_TIMEOUT", 3.0),
        flash_seconds=_float_env("NUMGUESS_FLASH_SECONDS", 0.8),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=settings.log_format)
