"""
Game session: the glue between a round, its statistics and storage.

- Resumes a saved round that is still in play, otherwise starts a new one.
- Saves the round after every accepted guess.
- Records each finished round in the statistics exactly once.

The session is front-end agnostic so the terminal app, tests or a future
web layer can all drive it the same way.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from enswordle.avatar import AvatarResolver
from enswordle.config import DEFAULT_CONFIG, GameConfig
from enswordle.engine import is_valid_guess, to_pattern
from enswordle.errors import GuessError
from enswordle.game import GameState, GameStatus, apply_guess, reset_round, start_round
from enswordle.stats import GameStatistics, default_statistics, record_outcome
from enswordle.storage import PersistenceGateway

logger = logging.getLogger(__name__)

_UNRESOLVED = object()


class GameSession:

    def __init__(
            self,
            gateway: PersistenceGateway,
            provider: Callable[[], str],
            *,
            avatar_resolver: Optional[AvatarResolver] = None,
            config: GameConfig = DEFAULT_CONFIG,
            clock: Callable[[], float] = time.time,
    ):
        self.gateway = gateway
        self.provider = provider
        self.avatar_resolver = avatar_resolver
        self.config = config
        self.clock = clock

        self._stats: GameStatistics = gateway.load_statistics() or default_statistics()
        self._avatar = _UNRESOLVED

        saved = gateway.load_game_state()
        if self._resumable(saved):
            self._state = saved
            logger.info("Resumed round (%d/%d guesses used)",
                        saved.guess_index, self.config.max_guesses)
        else:
            self._state = self._begin(start_round(self.provider(), self.clock()))

    def _resumable(self, saved: Optional[GameState]) -> bool:
        return (saved is not None
                and saved.status is GameStatus.PLAYING
                and saved.guess_index < self.config.max_guesses)

    def _begin(self, state: GameState) -> GameState:
        self._avatar = _UNRESOLVED
        self.gateway.save_game_state(state)
        logger.info("Started round: %d letters", state.target_length)
        return state

    # ---- read-only views ----

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def statistics(self) -> GameStatistics:
        return self._stats

    @property
    def avatar_url(self) -> Optional[str]:
        """Avatar clue for the current target, resolved once per target."""
        if self._avatar is _UNRESOLVED:
            self._avatar = self._resolve_avatar(self._state.target_word)
        return self._avatar

    def _resolve_avatar(self, name: str) -> Optional[str]:
        if self.avatar_resolver is None:
            return None
        try:
            return self.avatar_resolver.resolve_avatar(name)
        except Exception:
            # A broken clue must never break the round
            logger.exception("Avatar resolver failed")
            return None

    # ---- actions ----

    def is_valid_guess_format(self, word: str) -> bool:
        return is_valid_guess(word, self._state.target_length)

    def make_guess(self, word: str) -> GameState:
        """
        Submit a guess. Raises GuessError (state unchanged) on rejection.
        """
        try:
            state = apply_guess(self._state, word, self.clock(),
                                max_guesses=self.config.max_guesses)
        except GuessError as e:
            logger.info("Rejected guess %r: %s", word, e)
            raise

        self._state = state
        logger.info("Guess %d/%d %s", state.guess_index, self.config.max_guesses,
                    to_pattern(state.last_guess.feedback))
        self.gateway.save_game_state(state)

        if state.is_over:
            won = state.status is GameStatus.WON
            self._stats = record_outcome(self._stats, won, state.guess_index)
            self.gateway.save_statistics(self._stats)
            logger.info("Round %s in %d guess(es)", state.status.value, state.guess_index)

        return state

    def start_new_game(self) -> GameState:
        self.gateway.clear_game_state()
        self._state = self._begin(start_round(self.provider(), self.clock()))
        return self._state

    def reset_game(self) -> GameState:
        """Replay the current target from scratch (statistics untouched)."""
        avatar = self._avatar
        self._state = self._begin(reset_round(self._state, self.clock()))
        self._avatar = avatar
        return self._state
