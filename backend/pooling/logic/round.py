"""
Round state machine: join admission, investment submission, completion.

Every check runs before any mutation, so a Rejected outcome always leaves
the game untouched. The transitions waiting -> playing (capacity reached) and
playing -> finished (last submission, results attached) happen inside the
same call as the join or submit that triggers them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pooling.logic.enums import GameStatus, RejectionReason
from pooling.logic.outcome import JoinAccepted, Rejected, SubmitAccepted
from pooling.logic.payout import compute_results
from pooling.logic.rng import generate_player_id
from pooling.logic.settings import BUDGET, MAX_NAME_LENGTH
from pooling.logic.types import Player

if TYPE_CHECKING:
    import random

    from pooling.logic.outcome import JoinOutcome, SubmitOutcome
    from pooling.logic.types import GameSession


def as_whole_number(value: object) -> int | None:
    """Return value as an int if it is a whole number, otherwise None.

    Floats with no fractional part (50.0) count, matching JSON clients that
    do not distinguish the two. Booleans are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _new_player_id(game: GameSession, rng: random.Random) -> str:
    while True:
        player_id = generate_player_id(rng)
        if not game.has_player_id(player_id):
            return player_id


def join_game(game: GameSession | None, player_name: str, rng: random.Random) -> JoinOutcome:
    """Admit a new player to a waiting game."""
    if game is None:
        return Rejected(RejectionReason.GAME_NOT_FOUND)
    if game.status != GameStatus.WAITING:
        return Rejected(RejectionReason.GAME_ALREADY_STARTED)
    if game.is_full:
        return Rejected(RejectionReason.GAME_FULL)

    name = player_name.strip()
    if not name:
        return Rejected(RejectionReason.NAME_REQUIRED)
    if len(name) > MAX_NAME_LENGTH:
        return Rejected(RejectionReason.NAME_TOO_LONG)
    if game.has_player_named(name):
        return Rejected(RejectionReason.DUPLICATE_NAME)

    player = Player(player_id=_new_player_id(game, rng), name=name)
    game.players.append(player)
    if game.is_full:
        game.status = GameStatus.PLAYING

    return JoinAccepted(game=game, player_id=player.player_id)


def submit_investment(
    game: GameSession | None,
    player_id: str,
    asset_a: object,
    asset_b: object,
) -> SubmitOutcome:
    """Record one player's split of the budget; finish the game on the last one."""
    if game is None:
        return Rejected(RejectionReason.GAME_NOT_FOUND)
    if game.status != GameStatus.PLAYING:
        return Rejected(RejectionReason.GAME_NOT_PLAYING)

    player = game.find_player(player_id)
    if player is None:
        return Rejected(RejectionReason.PLAYER_NOT_FOUND)
    if player.submitted:
        return Rejected(RejectionReason.ALREADY_SUBMITTED)

    amount_a = as_whole_number(asset_a)
    amount_b = as_whole_number(asset_b)
    if amount_a is None or amount_b is None:
        return Rejected(RejectionReason.NOT_WHOLE_NUMBERS)
    if amount_a < 0 or amount_b < 0:
        return Rejected(RejectionReason.NEGATIVE_INVESTMENT)
    if amount_a + amount_b != BUDGET:
        return Rejected(RejectionReason.TOTAL_MISMATCH)

    player.asset_a = amount_a
    player.asset_b = amount_b
    player.submitted = True

    if game.all_submitted:
        game.results = compute_results(game)
        game.status = GameStatus.FINISHED

    return SubmitAccepted(game=game)
