"""
Guess format validation.

A guess is acceptable iff it has exactly the target's length and consists
of ASCII letters only. Surrounding whitespace is NOT trimmed: a stray space
is a format error the player must fix, never silently dropped.

Dictionary membership is intentionally not checked; any letter string of
the right length may be played against a name.
"""

import re

from enswordle.errors import InvalidCharacters, WrongLength

_LETTERS = re.compile(r"[A-Za-z]+")


def validate_guess(word: str, target_length: int) -> str:
    """
    Raise WrongLength / InvalidCharacters for a malformed guess.

    Returns the normalized (lowercase) word when it is acceptable.
    """
    if not isinstance(word, str):
        raise InvalidCharacters(repr(word))
    if len(word) != target_length:
        raise WrongLength(target_length, len(word))
    if not _LETTERS.fullmatch(word):
        raise InvalidCharacters(word)
    return word.lower()


def is_valid_guess(word: str, target_length: int) -> bool:
    """Boolean form of validate_guess, for pre-submission UI hints."""
    try:
        validate_guess(word, target_length)
    except (WrongLength, InvalidCharacters):
        return False
    return True
