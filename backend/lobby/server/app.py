from __future__ import annotations

import contextlib
import json
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from lobby.games.types import (
    CreateGameRequest,
    CreateGameResponse,
    GameStatusResponse,
    JoinGameRequest,
    JoinGameResponse,
    SubmitInvestmentRequest,
    SubmitInvestmentResponse,
    player_summaries,
)
from lobby.server.middleware import SecurityHeadersMiddleware, SlashNormalizationMiddleware
from lobby.server.settings import LobbyServerSettings
from pooling.logic.outcome import Rejected
from pooling.session.registry import GameRegistry
from shared.logging import setup_logging

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.requests import Request

CAPACITY_ERROR = "Number of players must be between 2 and 4"
JOIN_FIELDS_ERROR = "Game code and player name are required"
SUBMIT_FIELDS_ERROR = "All fields are required"
GAME_CODE_REQUIRED_ERROR = "Game code is required"
GAME_NOT_FOUND_ERROR = "Game not found"


class InvalidJSONBodyError(ValueError):
    pass


def _error(message: str, status_code: int = HTTPStatus.BAD_REQUEST) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object. An empty body reads as {}."""
    raw_body = await request.body()
    if not raw_body.strip():
        return {}
    try:
        body = json.loads(raw_body)
    except ValueError as e:
        raise InvalidJSONBodyError from e
    if not isinstance(body, dict):
        raise InvalidJSONBodyError
    return body


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


async def create_game(request: Request) -> JSONResponse:
    registry: GameRegistry = request.app.state.registry
    try:
        req = CreateGameRequest.model_validate(await _read_json_object(request))
    except InvalidJSONBodyError:
        return _error("Invalid JSON body")
    except ValidationError:
        return _error(CAPACITY_ERROR)

    game = registry.create_game(req.max_players)
    return JSONResponse(CreateGameResponse(game_id=game.game_id, max_players=game.max_players).model_dump(mode="json"))


async def join_game(request: Request) -> JSONResponse:
    registry: GameRegistry = request.app.state.registry
    try:
        req = JoinGameRequest.model_validate(await _read_json_object(request))
    except InvalidJSONBodyError:
        return _error("Invalid JSON body")
    except ValidationError:
        return _error(JOIN_FIELDS_ERROR)

    outcome = registry.join_game(req.game_id, req.player_name)
    if isinstance(outcome, Rejected):
        return _error(outcome.message)

    game = outcome.game
    response = JoinGameResponse(
        game_id=game.game_id,
        player_id=outcome.player_id,
        status=game.status,
        players=player_summaries(game),
        max_players=game.max_players,
    )
    return JSONResponse(response.model_dump(mode="json"))


async def game_status(request: Request) -> JSONResponse:
    registry: GameRegistry = request.app.state.registry
    game_id = request.query_params.get("game_id")
    if not game_id:
        return _error(GAME_CODE_REQUIRED_ERROR)

    game = registry.get_game(game_id)
    if game is None:
        return _error(GAME_NOT_FOUND_ERROR, status_code=HTTPStatus.NOT_FOUND)

    return JSONResponse(GameStatusResponse.from_game(game).model_dump(mode="json"))


async def submit_investment(request: Request) -> JSONResponse:
    registry: GameRegistry = request.app.state.registry
    try:
        req = SubmitInvestmentRequest.model_validate(await _read_json_object(request))
    except InvalidJSONBodyError:
        return _error("Invalid JSON body")
    except ValidationError:
        return _error(SUBMIT_FIELDS_ERROR)

    outcome = registry.submit_investment(req.game_id, req.player_id, req.asset_a, req.asset_b)
    if isinstance(outcome, Rejected):
        return _error(outcome.message)

    return JSONResponse(SubmitInvestmentResponse.from_game(outcome.game).model_dump(mode="json"))


def create_app(
    settings: LobbyServerSettings | None = None,
    registry: GameRegistry | None = None,
) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = LobbyServerSettings()
    if registry is None:
        registry = GameRegistry(
            max_age_seconds=settings.game_max_age_seconds,
            sweep_interval_seconds=settings.sweep_interval_seconds,
        )

    routes = [
        Route("/health", health, methods=["GET"], name="health"),
        Route("/api/game/create", create_game, methods=["POST"], name="create_game"),
        Route("/api/game/join", join_game, methods=["POST"], name="join_game"),
        Route("/api/game/status", game_status, methods=["GET"], name="game_status"),
        Route("/api/game/submit", submit_investment, methods=["POST"], name="submit_investment"),
    ]

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncGenerator[None]:
        registry.start_reaper()
        yield
        await registry.stop_reaper()

    app = Starlette(routes=routes, lifespan=lifespan)
    app.add_middleware(SlashNormalizationMiddleware)  # type: ignore[arg-type]
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(SecurityHeadersMiddleware)  # type: ignore[arg-type]

    app.state.settings = settings
    app.state.registry = registry

    logger.info("lobby server ready")
    return app


def get_app() -> Starlette:  # pragma: no cover
    """Factory function for uvicorn --factory lobby.server.app:get_app."""
    settings = LobbyServerSettings()
    setup_logging(log_dir=settings.log_dir or None)
    return create_app(settings=settings)
