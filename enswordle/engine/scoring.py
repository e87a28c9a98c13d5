"""
Per-position feedback for a single (guess, target) pair.

Feedback values:
  - correct        : right letter, right position
  - wrong-position : letter is in the target, elsewhere
  - absent         : letter not in the target (or already used up)

Algorithm (two-pass, duplicate-safe):
  1) First pass marks exact matches and counts the target letters that
     were NOT matched exactly.
  2) Second pass hands out wrong-position marks only while the letter
     still has unmatched occurrences left, so repeated letters in a
     guess are never over-counted.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple

from enswordle.errors import InvalidLength


class LetterFeedback(Enum):
    CORRECT = "correct"
    WRONG_POSITION = "wrong-position"
    ABSENT = "absent"


Feedback = Tuple[LetterFeedback, ...]

# Compact pattern characters, handy for logs and terminal output
_PATTERN_CHARS = {
    LetterFeedback.CORRECT: "G",
    LetterFeedback.WRONG_POSITION: "Y",
    LetterFeedback.ABSENT: "-",
}


def score(guess: str, target: str) -> Feedback:
    """
    Compute feedback for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); otherwise InvalidLength is raised.

    Examples:
      score("belle", "level") -> (absent, correct, wrong-position,
                                  wrong-position, wrong-position)
      score("HELLO", "hello") -> all correct
    """
    if len(guess) != len(target):
        raise InvalidLength(
            f"Guess and target must be the same length ({len(guess)} != {len(target)})")

    guess = guess.lower()
    target = target.lower()

    n = len(guess)
    feedback = [LetterFeedback.ABSENT] * n

    # Pass 1: exact matches; everything else in the target stays available
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            feedback[i] = LetterFeedback.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: wrong-position only while unmatched occurrences remain
    for i, g in enumerate(guess):
        if feedback[i] is LetterFeedback.CORRECT:
            continue
        if remaining[g] > 0:
            feedback[i] = LetterFeedback.WRONG_POSITION
            remaining[g] -= 1

    return tuple(feedback)


def is_solved(feedback: Iterable[LetterFeedback]) -> bool:
    """True iff every position is correct (and there is at least one)."""
    feedback = list(feedback)
    return bool(feedback) and all(f is LetterFeedback.CORRECT for f in feedback)


def to_pattern(feedback: Iterable[LetterFeedback]) -> str:
    """
    Render feedback as a 'G'/'Y'/'-' string.
    Example: (correct, absent, wrong-position) -> "G-Y"
    """
    return "".join(_PATTERN_CHARS[LetterFeedback(f)] for f in feedback)
