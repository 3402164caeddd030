"""Environment-backed settings for the Steam Library API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"


class MissingApiKeyError(RuntimeError):
    """Raised when a provider key is absent from the environment."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} is not set")
        self.variable = variable


@dataclass(frozen=True)
class Settings:
    steam_api_key: str
    rawg_api_key: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def require_steam_key(self) -> str:
        if not self.steam_api_key:
            raise MissingApiKeyError("STEAM_API_KEY")
        return self.steam_api_key

    def require_rawg_key(self) -> str:
        if not self.rawg_api_key:
            raise MissingApiKeyError("RAWG_API_KEY")
        return self.rawg_api_key

    def missing_keys(self) -> list[str]:
        missing = []
        if not self.steam_api_key:
            missing.append("STEAM_API_KEY")
        if not self.rawg_api_key:
            missing.append("RAWG_API_KEY")
        return missing


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default


def get_settings() -> Settings:
    """Read settings from the environment on every call so key changes apply without restart."""
    return Settings(
        steam_api_key=(os.getenv("STEAM_API_KEY") or "").strip(),
        rawg_api_key=(os.getenv("RAWG_API_KEY") or "").strip(),
        host=os.getenv("STEAM_LIBRARY_HOST") or DEFAULT_HOST,
        port=_int_env("STEAM_LIBRARY_PORT", DEFAULT_PORT),
        log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
