"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .roster import DEFAULT_SPORT, RosterRules, get_rules


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_SPORT_ENV = "PYROSTER_SPORT"
_STORAGE_KEY_ENV = "PYROSTER_STORAGE_KEY"

DEFAULT_STORAGE_KEY = "players"
DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "pyroster.sqlite"


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    if not value:
        logger.warning("Empty value for %s; using default %s", name, default)
        return default
    return value


def _env_sport(name: str, default: str) -> str:
    raw = _env_str(name, default)
    try:
        return get_rules(raw).sport
    except KeyError:
        logger.warning("Unknown sport for %s: %s; using default %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    sport: str = DEFAULT_SPORT
    storage_key: str = DEFAULT_STORAGE_KEY
    db_path: Path = DEFAULT_DB_PATH

    @property
    def rules(self) -> RosterRules:
        return get_rules(self.sport)


def load_settings(db_path: Path | str | None = None) -> Settings:
    """Build settings from the process environment."""

    return Settings(
        sport=_env_sport(_SPORT_ENV, DEFAULT_SPORT),
        storage_key=_env_str(_STORAGE_KEY_ENV, DEFAULT_STORAGE_KEY),
        db_path=Path(db_path) if db_path is not None else DEFAULT_DB_PATH,
    )
