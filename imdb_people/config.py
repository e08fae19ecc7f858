"""Runtime settings for the IMDb person scraper.

Configuration via environment variables:

- IMDB_BASE_URL (default: http://akas.imdb.com)
- IMDB_EMBED_BASE_URL (default: http://www.imdb.com)
- IMDB_HTTP_TIMEOUT (seconds, default: 10.0)
- IMDB_USER_AGENT (default: imdb-people/0.1)
- IMDB_LOG_LEVEL (read by the FastAPI app, default: INFO)

Values may also be placed in a .env file at the project root; variables already
present in the process environment win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://akas.imdb.com"
DEFAULT_EMBED_BASE_URL = "http://www.imdb.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "imdb-people/0.1"

_settings: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    embed_base_url: str = DEFAULT_EMBED_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        _load_env_from_file()
        return cls(
            base_url=(os.getenv("IMDB_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            embed_base_url=(os.getenv("IMDB_EMBED_BASE_URL") or DEFAULT_EMBED_BASE_URL).rstrip("/"),
            timeout=_parse_timeout(os.getenv("IMDB_HTTP_TIMEOUT")),
            user_agent=os.getenv("IMDB_USER_AGENT") or DEFAULT_USER_AGENT,
        )


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        val = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return val if val > 0 else DEFAULT_TIMEOUT


def _load_env_from_file() -> None:
    """Load environment variables from a .env file at the project root if present.

    Only sets variables that aren't already present in the process environment.
    """
    root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    env_path = os.path.join(root_dir, ".env")
    if not os.path.isfile(env_path):
        return
    try:
        with open(env_path, "r", encoding="utf-8") as f:
            for line in f:
                s = line.strip()
                if not s or s.startswith("#") or "=" not in s:
                    continue
                key, val = s.split("=", 1)
                key = key.strip()
                val = val.strip().strip('"').strip("'")
                if key and not os.environ.get(key):
                    os.environ[key] = val
    except OSError:
        # .env is optional
        return
