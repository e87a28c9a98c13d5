from .scoring import LetterFeedback, score, is_solved, to_pattern
from .knowledge import LetterState, LetterKnowledge, merge, state_of
from .validation import validate_guess, is_valid_guess

__all__ = [
    "LetterFeedback", "score", "is_solved", "to_pattern",
    "LetterState", "LetterKnowledge", "merge", "state_of",
    "validate_guess", "is_valid_guess",
]
