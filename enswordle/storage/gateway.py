"""
Persistence gateway: typed, fail-safe access to the key-value store.

Contract:
  - save(key, value) -> bool   never raises; False means "not persisted"
  - load(key) -> value | None  never returns a corrupt record; a record that
                               fails to parse or validate is cleared on the
                               spot so it cannot block later writes
  - clear(key)                 no-op when storage is unavailable

An unavailable store degrades to in-memory play: saves report False,
loads report nothing.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional

from enswordle.config import GAME_STATE_KEY, GAME_STATS_KEY
from enswordle.errors import CorruptPersistedState, StorageUnavailable
from enswordle.game import GameState
from enswordle.stats import GameStatistics
from .schema import decode_game_state, decode_statistics, encode_game_state, encode_statistics
from .stores import KeyValueStore

logger = logging.getLogger(__name__)


class Codec(NamedTuple):
    encode: Callable[[Any], Dict[str, Any]]
    decode: Callable[[Any], Any]


DEFAULT_CODECS: Mapping[str, Codec] = {
    GAME_STATE_KEY: Codec(encode_game_state, decode_game_state),
    GAME_STATS_KEY: Codec(encode_statistics, decode_statistics),
}


class PersistenceGateway:

    def __init__(self, store: KeyValueStore, codecs: Optional[Mapping[str, Codec]] = None):
        self.store = store
        self.codecs = dict(DEFAULT_CODECS if codecs is None else codecs)

    def _codec(self, key: str) -> Codec:
        try:
            return self.codecs[key]
        except KeyError as e:
            raise KeyError(f"No codec registered for key {key!r}. "
                           f"Known: {sorted(self.codecs)}") from e

    def save(self, key: str, value: Any) -> bool:
        codec = self._codec(key)
        try:
            document = json.dumps(codec.encode(value), ensure_ascii=False)
            self.store.set(key, document)
        except StorageUnavailable as e:
            logger.warning("Storage unavailable, %s will not be saved: %s", key, e)
            return False
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save %s: %s", key, e)
            return False
        return True

    def load(self, key: str) -> Optional[Any]:
        codec = self._codec(key)
        try:
            raw = self.store.get(key)
            if raw is None:
                return None
            return codec.decode(json.loads(raw))
        except StorageUnavailable as e:
            logger.warning("Storage unavailable, cannot load %s: %s", key, e)
            return None
        except (ValueError, TypeError, RecursionError) as e:
            # UnicodeDecodeError is a ValueError; RecursionError means absurd nesting
            kind = "invalid" if isinstance(e, CorruptPersistedState) else "unreadable"
            logger.warning("Clearing %s record for %s: %s", kind, key, e)
            self.clear(key)
            return None

    def clear(self, key: str) -> None:
        try:
            self.store.delete(key)
        except StorageUnavailable as e:
            logger.warning("Storage unavailable, cannot clear %s: %s", key, e)

    # Typed conveniences for the two records the game keeps

    def save_game_state(self, state: GameState) -> bool:
        return self.save(GAME_STATE_KEY, state)

    def load_game_state(self) -> Optional[GameState]:
        return self.load(GAME_STATE_KEY)

    def clear_game_state(self) -> None:
        self.clear(GAME_STATE_KEY)

    def save_statistics(self, stats: GameStatistics) -> bool:
        return self.save(GAME_STATS_KEY, stats)

    def load_statistics(self) -> Optional[GameStatistics]:
        return self.load(GAME_STATS_KEY)
