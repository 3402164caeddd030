"""Genre enrichment for owned games through the RAWG API."""

from __future__ import annotations

import logging
import re
from typing import Optional

import httpx

from .catalog import describe_http_error
from .config import MissingApiKeyError, get_settings
from .models import GenreRecord, RawgGameResponse

logger = logging.getLogger(__name__)

NON_SLUG_CHARS = re.compile(r"[^\w-]", re.ASCII)


class GenreLookupError(RuntimeError):
    """Raised when RAWG cannot provide the genres for a game."""

    def __init__(self, slug: str, reason: str) -> None:
        super().__init__(f"Genre lookup for '{slug}' failed: {reason}")
        self.slug = slug


def slugify(name: str) -> str:
    """Turn a Steam title into the RAWG path slug.

    Lower-cases, swaps each space for a hyphen, then drops anything that is
    not a word character or a hyphen. ``"Half-Life 2: Episode One"`` becomes
    ``"half-life-2-episode-one"``.
    """
    return NON_SLUG_CHARS.sub("", name.replace(" ", "-").lower())


class RawgClient:
    API_BASE = "https://api.rawg.io/api"

    def __init__(self, timeout: float = 10.0) -> None:
        self._http = httpx.Client(timeout=timeout)

    def get_game(self, slug: str, api_key: str) -> RawgGameResponse:
        # RAWG answers unknown slugs with a JSON error body; it decodes to no genres.
        response = self._http.get(
            f"{self.API_BASE}/games/{slug}",
            params={"key": api_key},
        )
        logger.debug(
            "RAWG lookup for slug='%s' returned HTTP %s", slug, response.status_code
        )
        return RawgGameResponse.model_validate(response.json())


class GenreProvider:
    def __init__(self, client: Optional[RawgClient] = None) -> None:
        self.client = client or RawgClient()

    def fetch_genres(self, game_name: str) -> list[GenreRecord]:
        slug = slugify(game_name)
        try:
            api_key = get_settings().require_rawg_key()
        except MissingApiKeyError as exc:
            raise GenreLookupError(slug, str(exc)) from exc

        try:
            payload = self.client.get_game(slug, api_key)
        except httpx.HTTPError as exc:
            raise GenreLookupError(slug, describe_http_error(exc)) from exc
        except ValueError as exc:
            reason = f"invalid JSON body ({exc.__class__.__name__})"
            raise GenreLookupError(slug, reason) from exc

        genres = payload.genres or []
        logger.debug("Found %d genres for '%s'", len(genres), slug)
        return genres
