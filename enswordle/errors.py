"""
Exception taxonomy shared across the engine, game and storage layers.
"""


class GuessError(ValueError):
    """A submitted guess was rejected; the game state is unchanged."""


class WrongLength(GuessError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Must be {expected} letters (got {actual})")
        self.expected = expected
        self.actual = actual


class InvalidCharacters(GuessError):
    def __init__(self, word: str):
        super().__init__("Only letters allowed")
        self.word = word


class GameAlreadyOver(GuessError):
    def __init__(self, status: str):
        super().__init__(f"Game is not in playing state ({status})")
        self.status = status


class InvalidLength(ValueError):
    """Scorer called with a guess and target of different lengths."""


class CorruptPersistedState(ValueError):
    """A stored record failed schema validation."""


class StorageUnavailable(OSError):
    """The backing key-value store cannot be used at all."""
