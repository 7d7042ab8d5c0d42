"""
Data structures for a single game and its players.

GameSession and Player are mutable and owned by the GameRegistry; callers
only hold them for the duration of one operation. PlayerResult is frozen:
results are computed once, when the last player submits, and never change.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from pooling.logic.enums import GameStatus


class PlayerResult(BaseModel):
    """Final payout for one player."""

    model_config = ConfigDict(frozen=True)

    player_name: str
    asset_a: int
    asset_b: int
    asset_b_payout: float
    total_payout: float


@dataclass
class Player:
    """A joined player. `submitted` is True only once both amounts are recorded."""

    player_id: str
    name: str
    asset_a: int | None = None
    asset_b: int | None = None
    submitted: bool = False


@dataclass
class GameSession:
    """One play-through, keyed by a short game code.

    Players are kept in join order; results mirror that order.
    """

    game_id: str
    max_players: int
    players: list[Player] = field(default_factory=list)
    status: GameStatus = GameStatus.WAITING
    results: tuple[PlayerResult, ...] | None = None
    created_at: float = field(default_factory=time.time)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_full(self) -> bool:
        return self.player_count >= self.max_players

    @property
    def all_submitted(self) -> bool:
        return bool(self.players) and all(p.submitted for p in self.players)

    def find_player(self, player_id: str) -> Player | None:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def has_player_named(self, name: str) -> bool:
        """Case-insensitive name check across joined players."""
        folded = name.lower()
        return any(p.name.lower() == folded for p in self.players)

    def has_player_id(self, player_id: str) -> bool:
        return self.find_player(player_id) is not None
