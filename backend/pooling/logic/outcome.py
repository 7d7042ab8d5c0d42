"""Tagged outcomes of join and submit operations.

Each operation returns exactly one of an accepted variant or `Rejected`.
Callers branch with `isinstance`; a rejection guarantees the game was not
modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from pooling.logic.enums import RejectionReason
    from pooling.logic.types import GameSession


class JoinAccepted(NamedTuple):
    game: GameSession
    player_id: str


class SubmitAccepted(NamedTuple):
    game: GameSession


class Rejected(NamedTuple):
    reason: RejectionReason

    @property
    def message(self) -> str:
        return self.reason.message


type JoinOutcome = JoinAccepted | Rejected
type SubmitOutcome = SubmitAccepted | Rejected
