"""Shared fixtures for the Steam Library API tests."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from steam_library.main import app

STEAM_OWNED_GAMES_URL = "https://api.steampowered.com/IPlayerService/GetOwnedGames/v1/"
RAWG_GAMES_URL = "https://api.rawg.io/api/games"
STEAM_ID = "76561197960435530"


def owned_games_payload(*games: tuple[int, str, int]) -> dict[str, Any]:
    """Build a GetOwnedGames body from (appid, name, playtime) tuples."""
    return {
        "response": {
            "game_count": len(games),
            "games": [
                {
                    "appid": appid,
                    "name": name,
                    "playtime_forever": playtime,
                    "img_icon_url": "abc123",
                    "has_community_visible_stats": True,
                }
                for appid, name, playtime in games
            ],
        }
    }


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEAM_API_KEY", "test_steam_key")
    monkeypatch.setenv("RAWG_API_KEY", "test_rawg_key")


@pytest.fixture
def client(mock_env: None) -> TestClient:
    return TestClient(app)
