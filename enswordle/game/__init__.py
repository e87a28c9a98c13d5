from .models import GameStatus, Guess, GameState
from .machine import (
    start_round, apply_guess, reset_round, duration_seconds, difficulty_for_length,
)

__all__ = [
    "GameStatus", "Guess", "GameState",
    "start_round", "apply_guess", "reset_round", "duration_seconds",
    "difficulty_for_length",
]
