"""
String enum definitions for game lifecycle and rejection reasons.
"""

from enum import StrEnum


class GameStatus(StrEnum):
    """Lifecycle of a game. Transitions only move forward."""

    WAITING = "waiting"
    PLAYING = "playing"
    FINISHED = "finished"


class RejectionReason(StrEnum):
    """Reasons a join or submission is refused. `message` is shown to players."""

    GAME_NOT_FOUND = "game_not_found"
    GAME_ALREADY_STARTED = "game_already_started"
    GAME_FULL = "game_full"
    NAME_REQUIRED = "name_required"
    NAME_TOO_LONG = "name_too_long"
    DUPLICATE_NAME = "duplicate_name"
    GAME_NOT_PLAYING = "game_not_playing"
    PLAYER_NOT_FOUND = "player_not_found"
    ALREADY_SUBMITTED = "already_submitted"
    NOT_WHOLE_NUMBERS = "not_whole_numbers"
    NEGATIVE_INVESTMENT = "negative_investment"
    TOTAL_MISMATCH = "total_mismatch"

    @property
    def message(self) -> str:
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.GAME_NOT_FOUND: "Game not found",
    RejectionReason.GAME_ALREADY_STARTED: "Game has already started",
    RejectionReason.GAME_FULL: "Game is full",
    RejectionReason.NAME_REQUIRED: "Player name is required",
    RejectionReason.NAME_TOO_LONG: "Name must be 20 characters or less",
    RejectionReason.DUPLICATE_NAME: "A player with that name already exists",
    RejectionReason.GAME_NOT_PLAYING: "Game is not in playing state",
    RejectionReason.PLAYER_NOT_FOUND: "Player not found",
    RejectionReason.ALREADY_SUBMITTED: "Already submitted",
    RejectionReason.NOT_WHOLE_NUMBERS: "Investments must be whole numbers",
    RejectionReason.NEGATIVE_INVESTMENT: "Investments cannot be negative",
    RejectionReason.TOTAL_MISMATCH: "Total investment must equal $100",
}
