"""FastAPI entry point for the Steam Library API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .auth import auth_router
from .catalog import GameCatalog, GameCatalogError, top_by_playtime
from .metadata import GenreLookupError, GenreProvider
from .models import GameRecord, GameSummary, RankedGameWithGenres

MINUTES_PER_DAY = 1440

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Steam Library API",
    description="Summaries of a Steam user's library ranked by playtime, with RAWG genres.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

games_router = APIRouter(prefix="/games", tags=["games"])
game_catalog = GameCatalog()
genre_provider = GenreProvider()


class ResponseError(RuntimeError):
    """Aborts a handler with a plain-text 500 carrying a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@app.exception_handler(ResponseError)
async def response_error_handler(request: Request, exc: ResponseError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=500)


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})


def _owned_games_or_error(steam_id: str) -> list[GameRecord]:
    try:
        return game_catalog.fetch_owned_games(steam_id)
    except GameCatalogError as exc:
        raise ResponseError("Could not find games") from exc


def playtime_message(game: GameRecord) -> str:
    if game.playtime_forever > 0:
        days = game.playtime_forever // MINUTES_PER_DAY
        if days > 0:
            return f"You have played {game.name} for a total of {days} days"
    return ""


# Handlers that call out to Steam/RAWG are plain functions so they run in the
# threadpool instead of blocking the event loop.
@games_router.get("/{steam_id}", response_model=list[GameRecord])
def owned_games(steam_id: str) -> list[GameRecord]:
    return _owned_games_or_error(steam_id)


@games_router.get("/{steam_id}/playdata", response_model=list[GameSummary])
def game_play_data(steam_id: str) -> list[GameSummary]:
    games = _owned_games_or_error(steam_id)
    return [
        GameSummary(name=game.name, image_url=game.image_url, message=playtime_message(game))
        for game in games
    ]


@games_router.get("/{steam_id}/top", response_model=list[GameRecord])
def top_games(steam_id: str) -> list[GameRecord]:
    try:
        games = game_catalog.fetch_owned_games(steam_id)
    except GameCatalogError:
        # A failed fetch ranks as an empty library.
        games = None
    return top_by_playtime(games)


@games_router.get("/{steam_id}/top/genres", response_model=list[RankedGameWithGenres])
def top_genres(steam_id: str) -> list[RankedGameWithGenres]:
    games = _owned_games_or_error(steam_id)
    ranked = top_by_playtime(games)
    if not ranked:
        raise ResponseError("Could not find top games")

    results: list[RankedGameWithGenres] = []
    for game in ranked:
        try:
            genres = genre_provider.fetch_genres(game.name)
        except GenreLookupError as exc:
            logger.warning("%s", exc)
            raise ResponseError("Could not find game genres") from exc
        results.append(RankedGameWithGenres(name=game.name, genres=genres))
    logger.debug("Resolved genres for %d top games of steamid=%s", len(results), steam_id)
    return results


app.include_router(auth_router)
app.include_router(games_router)
