"""
Round lifecycle: start a round, apply guesses, detect win/loss.

    playing --guess--> playing | won | lost
    won, lost: terminal (further guesses raise GameAlreadyOver)

Both operations are pure: they return a new GameState and leave their
input untouched, so a rejected guess can never leave a half-updated round.
"""

from __future__ import annotations

import dataclasses
import time
from typing import Optional

from enswordle.config import DEFAULT_MAX_GUESSES
from enswordle.engine import is_solved, merge, score, validate_guess
from enswordle.errors import GameAlreadyOver
from .models import GameState, GameStatus, Guess


def _now(now: Optional[float]) -> float:
    return time.time() if now is None else float(now)


def start_round(target: str, now: Optional[float] = None) -> GameState:
    """Fresh `playing` state for `target` with no guesses yet."""
    if not isinstance(target, str) or not target or not target.isascii() or not target.isalpha():
        raise ValueError(f"target must be a non-empty alphabetic string; got {target!r}")
    target = target.lower()
    return GameState(
        target_word=target,
        target_length=len(target),
        guesses=(),
        guess_index=0,
        status=GameStatus.PLAYING,
        letter_knowledge={},
        started_at=_now(now),
        ended_at=None,
    )


def apply_guess(
        state: GameState,
        raw_word: str,
        now: Optional[float] = None,
        *,
        max_guesses: int = DEFAULT_MAX_GUESSES,
) -> GameState:
    """
    Accept one guess and return the next state.

    Raises:
      WrongLength       : len(raw_word) != state.target_length
      InvalidCharacters : anything but A-Z / a-z (whitespace included)
      GameAlreadyOver   : the round is already won or lost
    """
    word = validate_guess(raw_word, state.target_length)
    if state.status.is_terminal:
        raise GameAlreadyOver(state.status.value)

    feedback = score(word, state.target_word)
    guesses = state.guesses + (Guess(word=word, feedback=feedback),)
    guess_index = state.guess_index + 1
    knowledge = merge(state.letter_knowledge, word, feedback)

    # Win is checked first: a correct final guess is a win, not a loss
    if is_solved(feedback):
        status = GameStatus.WON
    elif guess_index >= max_guesses:
        status = GameStatus.LOST
    else:
        status = GameStatus.PLAYING

    return dataclasses.replace(
        state,
        guesses=guesses,
        guess_index=guess_index,
        letter_knowledge=knowledge,
        status=status,
        ended_at=_now(now) if status.is_terminal else None,
    )


def reset_round(state: GameState, now: Optional[float] = None) -> GameState:
    """Same target, no guesses, new start time."""
    return start_round(state.target_word, now)


def duration_seconds(state: GameState, now: Optional[float] = None) -> int:
    """Whole seconds from start to end (or to `now` while still playing)."""
    end = state.ended_at if state.ended_at is not None else _now(now)
    return round(end - state.started_at)


def difficulty_for_length(length: int) -> str:
    if length <= 5:
        return "easy"
    if length <= 8:
        return "medium"
    return "hard"
