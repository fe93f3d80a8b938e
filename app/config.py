from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


REPO_ROOT = Path(__file__).resolve().parents[1]

# Load environment variables from .env file
load_dotenv(REPO_ROOT / ".env")


def _resolve(path: str) -> str:
    if not os.path.isabs(path):
        return str(REPO_ROOT / path)
    return path


class Settings:
    """Runtime settings read from the environment.

    Only the application factory reads these; the shuffle, session and
    narrative components get their values through constructors.
    """

    def __init__(self) -> None:
        self.deck_path: str = _resolve(os.getenv("DECK_PATH", os.path.join("app", "data", "tarot_deck.json")))
        self.pool_size: int = int(os.getenv("POOL_SIZE", "8"))
        self.pick_count: int = int(os.getenv("PICK_COUNT", "7"))
        self.session_ttl_seconds: float = float(os.getenv("SESSION_TTL_SECONDS", str(30 * 60)))
        self.sweep_interval_seconds: float = float(os.getenv("SWEEP_INTERVAL_SECONDS", str(5 * 60)))
        self.static_dir: str = _resolve(os.getenv("STATIC_DIR", "static"))
        self.index_page: str = os.getenv("INDEX_PAGE", "tarot-pro.html")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
