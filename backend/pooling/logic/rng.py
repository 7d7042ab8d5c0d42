"""
Random source for game codes and player ids.

Game codes are typed by people, so the alphabet drops characters that are
easy to confuse (I, O, 0, 1). Production uses the OS entropy pool via
SystemRandom; tests pass a seed, or their own random.Random, to make code
collisions and retries deterministic.
"""

import random
import string

GAME_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
GAME_CODE_LENGTH = 5
PLAYER_ID_ALPHABET = string.ascii_lowercase + string.digits
PLAYER_ID_LENGTH = 8


def create_rng(seed: str | int | None = None) -> random.Random:
    """Return a seeded Random for reproducible draws, or SystemRandom when seed is None."""
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)


def generate_game_code(rng: random.Random) -> str:
    return "".join(rng.choices(GAME_CODE_ALPHABET, k=GAME_CODE_LENGTH))


def generate_player_id(rng: random.Random) -> str:
    return "".join(rng.choices(PLAYER_ID_ALPHABET, k=PLAYER_ID_LENGTH))
