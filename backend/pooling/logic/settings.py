"""Fixed rules of the pooled investment game."""

MIN_PLAYERS = 2
MAX_PLAYERS = 4
MAX_NAME_LENGTH = 20

BUDGET = 100  # dollars each player splits between asset A and asset B
POOL_MULTIPLIER = 1.5  # asset B pool grows by 50% before being shared out
