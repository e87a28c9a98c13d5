"""
JSON document schema for persisted records.

Encoders turn the immutable model values into plain JSON-ready dicts whose
keys are exactly the model's fields. Decoders go the other way and are
strict: a missing field, a wrong type, an unknown enum value or a broken
structural invariant raises CorruptPersistedState.
"""

from __future__ import annotations

from typing import Any, Dict, List

from enswordle.engine import LetterFeedback, LetterState, is_solved, score
from enswordle.errors import CorruptPersistedState
from enswordle.game import GameState, GameStatus, Guess
from enswordle.stats import GameStatistics

GAME_STATE_FIELDS = (
    "target_word",
    "target_length",
    "guesses",
    "guess_index",
    "status",
    "letter_knowledge",
    "started_at",
)
GAME_STATS_FIELDS = (
    "games_played",
    "games_won",
    "current_streak",
    "max_streak",
    "guess_distribution",
)


# -----------------------------
# Type checks
# -----------------------------

def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _require(data: Any, fields) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise CorruptPersistedState(f"expected an object, got {type(data).__name__}")
    missing = [f for f in fields if f not in data]
    if missing:
        raise CorruptPersistedState(f"missing required field(s): {missing}")
    return data


def _enum(cls, value: Any, what: str):
    try:
        return cls(value)
    except ValueError:
        raise CorruptPersistedState(f"invalid {what}: {value!r}") from None


def _check(cond: bool, message: str) -> None:
    if not cond:
        raise CorruptPersistedState(message)


# -----------------------------
# GameState
# -----------------------------

def encode_game_state(state: GameState) -> Dict[str, Any]:
    return {
        "target_word": state.target_word,
        "target_length": state.target_length,
        "guesses": [
            {"word": g.word, "feedback": [f.value for f in g.feedback]}
            for g in state.guesses
        ],
        "guess_index": state.guess_index,
        "status": state.status.value,
        "letter_knowledge": {k: v.value for k, v in state.letter_knowledge.items()},
        "started_at": state.started_at,
        "ended_at": state.ended_at,
    }


def _decode_guess(raw: Any, length: int) -> Guess:
    guess = _require(raw, ("word", "feedback"))
    word, feedback = guess["word"], guess["feedback"]
    _check(isinstance(word, str) and word.isascii() and word.isalpha() and word.islower(),
           f"invalid guess word: {word!r}")
    _check(isinstance(feedback, list), "guess feedback must be a list")
    _check(len(word) == length and len(feedback) == length,
           f"guess {word!r} does not match target length {length}")
    return Guess(word=word,
                 feedback=tuple(_enum(LetterFeedback, f, "feedback") for f in feedback))


def decode_game_state(data: Any) -> GameState:
    d = _require(data, GAME_STATE_FIELDS)

    target = d["target_word"]
    _check(isinstance(target, str) and target.isascii() and target.isalpha(),
           f"invalid target_word: {target!r}")
    _check(_is_int(d["target_length"]) and d["target_length"] == len(target),
           "target_length does not match target_word")
    _check(isinstance(d["guesses"], list), "guesses must be a list")
    _check(_is_int(d["guess_index"]) and d["guess_index"] == len(d["guesses"]),
           "guess_index does not match number of guesses")
    _check(isinstance(d["letter_knowledge"], dict), "letter_knowledge must be an object")
    _check(_is_number(d["started_at"]), "started_at must be a number")

    ended_at = d.get("ended_at")
    _check(ended_at is None or _is_number(ended_at), "ended_at must be a number or null")

    status = _enum(GameStatus, d["status"], "status")
    guesses: List[Guess] = [_decode_guess(g, len(target)) for g in d["guesses"]]

    knowledge = {}
    for letter, value in d["letter_knowledge"].items():
        _check(len(letter) == 1 and letter.isascii() and letter.islower() and letter.isalpha(),
               f"invalid letter_knowledge key: {letter!r}")
        knowledge[letter] = _enum(LetterState, value, "letter state")

    # Lifecycle invariants
    _check(not status.is_terminal or ended_at is not None, "finished game without ended_at")
    for g in guesses:
        _check(list(score(g.word, target)) == list(g.feedback),
               f"feedback for {g.word!r} does not match target_word")
    _check(not any(is_solved(g.feedback) for g in guesses[:-1]),
           "round continued after a solving guess")
    if status is GameStatus.WON:
        _check(bool(guesses) and is_solved(guesses[-1].feedback),
               "won game whose last guess is not all correct")
    elif guesses:
        _check(not is_solved(guesses[-1].feedback),
               f"{status.value} game whose last guess solved it")

    return GameState(
        target_word=target,
        target_length=d["target_length"],
        guesses=tuple(guesses),
        guess_index=d["guess_index"],
        status=status,
        letter_knowledge=knowledge,
        started_at=float(d["started_at"]),
        ended_at=None if ended_at is None else float(ended_at),
    )


# -----------------------------
# GameStatistics
# -----------------------------

def encode_statistics(stats: GameStatistics) -> Dict[str, Any]:
    return {
        "games_played": stats.games_played,
        "games_won": stats.games_won,
        "current_streak": stats.current_streak,
        "max_streak": stats.max_streak,
        # JSON object keys are strings
        "guess_distribution": {str(k): v for k, v in sorted(stats.guess_distribution.items())},
    }


def decode_statistics(data: Any) -> GameStatistics:
    d = _require(data, GAME_STATS_FIELDS)
    for name in GAME_STATS_FIELDS[:-1]:
        _check(_is_int(d[name]) and d[name] >= 0, f"{name} must be a non-negative integer")
    _check(d["games_won"] <= d["games_played"], "games_won exceeds games_played")

    raw_dist = d["guess_distribution"]
    _check(isinstance(raw_dist, dict), "guess_distribution must be an object")
    distribution = {}
    for key, count in raw_dist.items():
        try:
            guesses = int(key)
        except (TypeError, ValueError):
            raise CorruptPersistedState(f"invalid guess_distribution key: {key!r}") from None
        _check(guesses >= 1 and _is_int(count) and count >= 0,
               f"invalid guess_distribution entry: {key!r}: {count!r}")
        distribution[guesses] = count

    return GameStatistics(
        games_played=d["games_played"],
        games_won=d["games_won"],
        current_streak=d["current_streak"],
        max_streak=d["max_streak"],
        guess_distribution=distribution,
    )
