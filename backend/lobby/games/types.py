from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pooling.logic.enums import GameStatus
from pooling.logic.round import as_whole_number
from pooling.logic.settings import MAX_PLAYERS, MIN_PLAYERS
from pooling.logic.types import PlayerResult

if TYPE_CHECKING:
    from pooling.logic.types import GameSession


class CreateGameRequest(BaseModel):
    max_players: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS)

    @field_validator("max_players", mode="before")
    @classmethod
    def validate_whole_number(cls, v: object) -> int:
        number = as_whole_number(v)
        if number is None:
            raise ValueError("max_players must be a whole number")
        return number


class JoinGameRequest(BaseModel):
    game_id: str = Field(min_length=1)
    player_name: str = Field(min_length=1)


class SubmitInvestmentRequest(BaseModel):
    """Amounts are passed through untyped; the round logic rejects non-whole numbers."""

    game_id: str = Field(min_length=1)
    player_id: str = Field(min_length=1)
    asset_a: Any
    asset_b: Any


class PlayerSummary(BaseModel):
    """Public view of a player. Player ids are never listed."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    submitted: bool


class CreateGameResponse(BaseModel):
    game_id: str
    max_players: int


class JoinGameResponse(BaseModel):
    game_id: str
    player_id: str
    status: GameStatus
    players: list[PlayerSummary]
    max_players: int


class GameStatusResponse(BaseModel):
    game_id: str
    status: GameStatus
    max_players: int
    players: list[PlayerSummary]
    results: list[PlayerResult] | None

    @classmethod
    def from_game(cls, game: GameSession) -> GameStatusResponse:
        return cls(
            game_id=game.game_id,
            status=game.status,
            max_players=game.max_players,
            players=player_summaries(game),
            results=results_view(game),
        )


class SubmitInvestmentResponse(BaseModel):
    game_id: str
    status: GameStatus
    players: list[PlayerSummary]
    results: list[PlayerResult] | None

    @classmethod
    def from_game(cls, game: GameSession) -> SubmitInvestmentResponse:
        return cls(
            game_id=game.game_id,
            status=game.status,
            players=player_summaries(game),
            results=results_view(game),
        )


def player_summaries(game: GameSession) -> list[PlayerSummary]:
    return [PlayerSummary.model_validate(p) for p in game.players]


def results_view(game: GameSession) -> list[PlayerResult] | None:
    """Results in player order, or None until the game is finished."""
    return list(game.results) if game.results is not None else None
