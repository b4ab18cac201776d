"""Utility helpers for word normalization, app directories, logging, and config."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".word_ladder_game"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".word_ladder_game")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
LOG_PATH = APP_DIR / "game.log"
DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent / "sample_data" / "dictionary.txt"


def ensure_app_dirs() -> None:
    """Create app directories if they do not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """Load config from the user home config file."""
    ensure_app_dirs()
    if not CONFIG_PATH.exists():
        return {}
    try:
        return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", CONFIG_PATH)
        return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    try:
        CONFIG_PATH.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logging.exception("Failed to save config to %s", CONFIG_PATH)


def normalize_word(word: str | None) -> str:
    """Trim surrounding whitespace and lowercase; None becomes an empty string."""
    if word is None:
        return ""
    return word.strip().lower()


def differs_by_one_letter(first: str, second: str) -> bool:
    """True when both words have equal length and exactly one position differs."""
    if len(first) != len(second):
        return False
    differences = sum(1 for a, b in zip(first, second) if a != b)
    return differences == 1
