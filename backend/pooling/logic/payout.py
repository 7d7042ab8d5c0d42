"""
Payout rule for the pooled investment game.

Asset A is riskless: each player gets their own amount back. Asset B is
pooled across all players, grown by POOL_MULTIPLIER, and split equally
regardless of who contributed what. The per-player share is kept unrounded
until the final figures, and the rounded share is the same value for every
player in a game.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from pooling.logic.settings import POOL_MULTIPLIER
from pooling.logic.types import PlayerResult

if TYPE_CHECKING:
    from pooling.logic.types import GameSession

_CENTS = Decimal("0.01")


def round2(value: float) -> float:
    """Round half up to 2 decimal places using the shortest decimal repr of value."""
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def compute_results(game: GameSession) -> tuple[PlayerResult, ...]:
    """Compute every player's payout. All players must have submitted."""
    if not game.players:
        raise ValueError(f"Game {game.game_id} has no players")
    pending = [p.name for p in game.players if not p.submitted]
    if pending:
        raise ValueError(f"Game {game.game_id} has players who have not submitted: {pending}")

    pool = sum(p.asset_b or 0 for p in game.players)
    share = pool * POOL_MULTIPLIER / len(game.players)
    asset_b_payout = round2(share)

    return tuple(
        PlayerResult(
            player_name=p.name,
            asset_a=p.asset_a or 0,
            asset_b=p.asset_b or 0,
            asset_b_payout=asset_b_payout,
            total_payout=round2((p.asset_a or 0) + share),
        )
        for p in game.players
    )
