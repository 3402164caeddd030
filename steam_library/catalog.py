"""Owned-game lookups against the Steam Web API and playtime ranking."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from .config import MissingApiKeyError, get_settings
from .models import GameRecord, SteamOwnedGamesResponse

logger = logging.getLogger(__name__)

HEADER_IMAGE_TEMPLATE = "https://cdn.akamai.steamstatic.com/steam/apps/{appid}/header.jpg"
TOP_GAMES_LIMIT = 5


class GameCatalogError(RuntimeError):
    """Raised when the owned games for a Steam user cannot be retrieved."""


def describe_http_error(exc: httpx.HTTPError) -> str:
    """Summarize an httpx failure without echoing the request URL and its key."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return type(exc).__name__


def header_image_url(appid: int) -> str:
    return HEADER_IMAGE_TEMPLATE.format(appid=appid)


def top_by_playtime(
    games: Optional[Sequence[GameRecord]], limit: int = TOP_GAMES_LIMIT
) -> list[GameRecord]:
    """Return at most ``limit`` games, most played first.

    The input is left untouched and ``None`` is treated as an empty library.
    """
    if not games:
        return []
    ranked = sorted(games, key=lambda game: game.playtime_forever, reverse=True)
    return ranked[:limit]


class SteamClient:
    API_BASE = "https://api.steampowered.com"
    OWNED_GAMES_PATH = "/IPlayerService/GetOwnedGames/v1/"

    def __init__(self, timeout: float = 10.0) -> None:
        self._http = httpx.Client(timeout=timeout)

    def get_owned_games(self, steam_id: str, api_key: str) -> Optional[list[GameRecord]]:
        """Return the raw owned-game records, or ``None`` when Steam omits the list.

        Steam leaves ``games`` out entirely for private or unknown profiles.
        """
        response = self._http.get(
            f"{self.API_BASE}{self.OWNED_GAMES_PATH}",
            params={"key": api_key, "steamid": steam_id, "include_appinfo": 1},
        )
        response.raise_for_status()
        payload = SteamOwnedGamesResponse.model_validate(response.json())
        games = payload.response.games
        logger.debug(
            "Steam owned games for steamid=%s returned %s records",
            steam_id,
            None if games is None else len(games),
        )
        return games


class GameCatalog:
    """Fetches a user's library and decorates every game with its header image."""

    def __init__(self, client: Optional[SteamClient] = None) -> None:
        self.client = client or SteamClient()

    def fetch_owned_games(self, steam_id: str) -> list[GameRecord]:
        try:
            api_key = get_settings().require_steam_key()
        except MissingApiKeyError as exc:
            logger.warning("Steam API key not found")
            raise GameCatalogError(str(exc)) from exc

        try:
            games = self.client.get_owned_games(steam_id, api_key)
        except httpx.HTTPError as exc:
            logger.warning(
                "Failed to make request to Steam Web API: %s", describe_http_error(exc)
            )
            raise GameCatalogError("Steam request failed") from exc
        except ValueError as exc:
            logger.warning("Failed to parse Steam owned games response: %s", exc)
            raise GameCatalogError("Steam response was not understood") from exc

        if games is None:
            logger.info("Steam returned no game list for steamid=%s", steam_id)
            raise GameCatalogError(f"No games listed for steamid={steam_id}")

        return [
            game.model_copy(update={"image_url": header_image_url(game.appid)})
            for game in games
        ]
