"""
Game data model.

Every value here is immutable: a round moves forward by building a new
GameState from the previous one, never by editing it in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from enswordle.engine import LetterFeedback, LetterState


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


@dataclass(frozen=True)
class Guess:
    """One submitted word and its per-position feedback."""
    word: str
    feedback: Tuple[LetterFeedback, ...]

    def __post_init__(self):
        if len(self.word) != len(self.feedback):
            raise ValueError(
                f"word/feedback length mismatch: {len(self.word)} != {len(self.feedback)}")


def _frozen(mapping: Mapping[str, LetterState]) -> Mapping[str, LetterState]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class GameState:
    target_word: str
    target_length: int
    guesses: Tuple[Guess, ...]
    guess_index: int
    status: GameStatus
    letter_knowledge: Mapping[str, LetterState] = field(default_factory=dict)
    started_at: float = 0.0
    ended_at: Optional[float] = None

    def __post_init__(self):
        # Freeze containers handed in by callers
        object.__setattr__(self, "guesses", tuple(self.guesses))
        object.__setattr__(self, "letter_knowledge", _frozen(self.letter_knowledge))

    @property
    def last_guess(self) -> Optional[Guess]:
        return self.guesses[-1] if self.guesses else None

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal
