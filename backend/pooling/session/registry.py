"""In-memory registry of game sessions with age-based eviction."""

from __future__ import annotations

import asyncio
import contextlib
import time
from typing import TYPE_CHECKING

import structlog

from pooling.logic.enums import GameStatus
from pooling.logic.outcome import Rejected
from pooling.logic.rng import create_rng, generate_game_code
from pooling.logic.round import join_game, submit_investment
from pooling.logic.types import GameSession

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from pooling.logic.outcome import JoinOutcome, SubmitOutcome

DEFAULT_MAX_AGE_SECONDS = 3600  # 1 hour
DEFAULT_SWEEP_INTERVAL_SECONDS = 1800  # 30 minutes

logger = structlog.get_logger()


class GameRegistry:
    """Owns every live game, keyed by its upper-case game code.

    Purely state management, no HTTP. All mutation runs synchronously on the
    event loop thread, so a join or submit and the status transition it
    triggers can never interleave with another request on the same game.

    Games are evicted by age alone, whatever their status. Call
    start_reaper() on app startup and stop_reaper() on shutdown; tests call
    evict_expired() directly with an injected clock.
    """

    def __init__(
        self,
        max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
        sweep_interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._games: dict[str, GameSession] = {}
        self._max_age_seconds = max_age_seconds
        self._sweep_interval_seconds = sweep_interval_seconds
        self._rng = rng if rng is not None else create_rng()
        self._clock = clock
        self._reaper_task: asyncio.Task[None] | None = None

    @property
    def game_count(self) -> int:
        return len(self._games)

    def create_game(self, max_players: int) -> GameSession:
        """Create an empty waiting game under a fresh code.

        max_players is validated by the caller.
        """
        game_id = generate_game_code(self._rng)
        while game_id in self._games:
            game_id = generate_game_code(self._rng)

        game = GameSession(game_id=game_id, max_players=max_players, created_at=self._clock())
        self._games[game_id] = game
        logger.info("game created", game_id=game_id, max_players=max_players)
        return game

    def get_game(self, game_id: str) -> GameSession | None:
        return self._games.get(game_id.upper())

    def join_game(self, game_id: str, player_name: str) -> JoinOutcome:
        outcome = join_game(self.get_game(game_id), player_name, self._rng)
        if isinstance(outcome, Rejected):
            logger.debug("join rejected", game_id=game_id, reason=outcome.reason)
            return outcome

        game = outcome.game
        logger.info("player joined", game_id=game.game_id, player_id=outcome.player_id, count=game.player_count)
        if game.status == GameStatus.PLAYING:
            logger.info("game started", game_id=game.game_id, count=game.player_count)
        return outcome

    def submit_investment(self, game_id: str, player_id: str, asset_a: object, asset_b: object) -> SubmitOutcome:
        outcome = submit_investment(self.get_game(game_id), player_id, asset_a, asset_b)
        if isinstance(outcome, Rejected):
            logger.debug("submission rejected", game_id=game_id, player_id=player_id, reason=outcome.reason)
            return outcome

        game = outcome.game
        logger.info("investment submitted", game_id=game.game_id, player_id=player_id)
        if game.status == GameStatus.FINISHED:
            logger.info("game finished", game_id=game.game_id, count=game.player_count)
        return outcome

    def evict_expired(self) -> list[str]:
        """Remove games at least max_age_seconds old, in any status. Return their codes."""
        now = self._clock()
        expired = [
            game_id for game_id, game in self._games.items() if now - game.created_at >= self._max_age_seconds
        ]
        for game_id in expired:
            del self._games[game_id]
        if expired:
            logger.info("evicted expired games", count=len(expired))
        return expired

    def start_reaper(self) -> None:
        """Start the periodic eviction task."""
        if self._reaper_task is not None and not self._reaper_task.done():
            return
        self._reaper_task = asyncio.create_task(self._reaper_loop())

    async def stop_reaper(self) -> None:
        """Cancel the eviction task."""
        if self._reaper_task is not None:
            self._reaper_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._reaper_task
            self._reaper_task = None

    async def _reaper_loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval_seconds)
            self.evict_expired()
