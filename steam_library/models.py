"""Pydantic models shared across the Steam Library API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GameRecord(BaseModel):
    """An owned game as reported by Steam, plus its store header image."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    appid: int
    name: str = ""
    playtime_forever: int = Field(default=0, ge=0)
    image_url: str = Field(default="", alias="ImageURL")


class SteamOwnedGames(BaseModel):
    game_count: Optional[int] = None
    games: Optional[list[GameRecord]] = None


class SteamOwnedGamesResponse(BaseModel):
    """Envelope returned by IPlayerService/GetOwnedGames."""

    response: SteamOwnedGames = Field(default_factory=SteamOwnedGames)


class GenreRecord(BaseModel):
    name: str = ""


class RawgGameResponse(BaseModel):
    genres: Optional[list[GenreRecord]] = None


class GameSummary(BaseModel):
    """Play data card rendered by the client for every owned game."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    image_url: str = Field(alias="ImageUrl")
    message: str = Field(default="", alias="Message")


class RankedGameWithGenres(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    genres: list[GenreRecord] = Field(default_factory=list, alias="Genre")


class MessageResponse(BaseModel):
    message: str
