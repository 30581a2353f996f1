"""Settings read from the environment (an optional .env file is loaded first)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "TICTACTOE_"
DEFAULT_DATABASE_URL = "sqlite:///tictactoe.db"
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = DEFAULT_LOG_LEVEL
    db_echo: bool = False


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from TICTACTOE_* environment variables."""
    if dotenv:
        load_dotenv()

    return Settings(
        database_url=os.environ.get(f"{ENV_PREFIX}DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        db_echo=os.environ.get(f"{ENV_PREFIX}DB_ECHO", "").strip().lower() in _TRUTHY,
    )
