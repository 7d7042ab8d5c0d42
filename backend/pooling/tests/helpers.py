"""Builders and fakes for pooling tests."""

from __future__ import annotations

from pooling.logic.types import GameSession, Player


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_player(
    name: str,
    asset_a: int | None = None,
    asset_b: int | None = None,
    player_id: str | None = None,
) -> Player:
    """Create a Player; it counts as submitted when both amounts are given."""
    return Player(
        player_id=player_id or f"id-{name.lower()}",
        name=name,
        asset_a=asset_a,
        asset_b=asset_b,
        submitted=asset_a is not None and asset_b is not None,
    )


def make_game(*players: Player, max_players: int | None = None, game_id: str = "ABCDE") -> GameSession:
    return GameSession(
        game_id=game_id,
        max_players=max_players if max_players is not None else max(len(players), 2),
        players=list(players),
    )
