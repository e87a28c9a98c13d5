"""
Game-wide settings.

Single source of truth for the guess budget and the collaborator timeouts.
Front-ends override these through their own command-line flags.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_GUESSES = 6

GAME_STATE_KEY = "ens-wordle-game-state"
GAME_STATS_KEY = "ens-wordle-stats"


@dataclass(frozen=True)
class GameConfig:
    max_guesses: int = DEFAULT_MAX_GUESSES
    avatar_timeout: float = 3.0   # seconds, per avatar lookup request
    store_dir: str = ".enswordle"

    def __post_init__(self):
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1; got {self.max_guesses}")


DEFAULT_CONFIG = GameConfig()
