"""
Best-known state of every letter across a round.

A letter's state only ever moves forward along

    unused < absent < wrong-position < correct

so the keyboard shows the most useful thing ever learned about it.
The ordering lives on the enum itself, which makes `max()` the merge rule.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Dict, Iterable, Mapping

from .scoring import LetterFeedback


@total_ordering
class LetterState(Enum):
    UNUSED = "unused"
    ABSENT = "absent"
    WRONG_POSITION = "wrong-position"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        return _RANK[self]

    def __lt__(self, other):
        if not isinstance(other, LetterState):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def from_feedback(cls, feedback: LetterFeedback) -> "LetterState":
        return cls(LetterFeedback(feedback).value)


_RANK = {state: i for i, state in enumerate(LetterState)}

LetterKnowledge = Mapping[str, LetterState]


def state_of(knowledge: LetterKnowledge, letter: str) -> LetterState:
    """Letters never guessed are implicitly unused."""
    return knowledge.get(letter.lower(), LetterState.UNUSED)


def merge(current: LetterKnowledge, guess: str,
          feedback: Iterable[LetterFeedback]) -> Dict[str, LetterState]:
    """
    Fold one guess's feedback into `current` and return a NEW mapping.

    Each letter keeps max(known state, state implied by this guess).
    Letters absent from the guess are carried over untouched; the input
    mapping is never modified.
    """
    out: Dict[str, LetterState] = dict(current)
    for letter, fb in zip(guess.lower(), feedback):
        candidate = LetterState.from_feedback(fb)
        out[letter] = max(state_of(out, letter), candidate)
    return out
