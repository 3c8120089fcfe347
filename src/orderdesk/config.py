"""Application configuration read from the environment.

A .env file found from the working directory upward is loaded first;
variables already set in the process environment take precedence.

ORDERDESK_DB_PATH       SQLite file (default data/orders.db)
ORDERDESK_CORS_ORIGINS  comma-separated allowed origins
LOG_LEVEL               root logging level (default INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_DB_PATH = Path("data/orders.db")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",  # Vite dev server
)


@dataclass(frozen=True)
class Settings:
    """Top-level application settings."""

    db_path: Path
    cors_origins: tuple[str, ...]
    log_level: str


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated origin list, dropping blanks."""
    if raw is None:
        return DEFAULT_CORS_ORIGINS
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or DEFAULT_CORS_ORIGINS


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings.

    Call get_settings.cache_clear() to re-read the environment.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)

    raw_db_path = os.environ.get("ORDERDESK_DB_PATH", "").strip()

    return Settings(
        db_path=Path(raw_db_path) if raw_db_path else DEFAULT_DB_PATH,
        cors_origins=_parse_origins(os.environ.get("ORDERDESK_CORS_ORIGINS")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
