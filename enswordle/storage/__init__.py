from .stores import KeyValueStore, MemoryStore, DisabledStore, JsonFileStore
from .schema import encode_game_state, decode_game_state, encode_statistics, decode_statistics
from .gateway import PersistenceGateway, Codec

__all__ = [
    "KeyValueStore", "MemoryStore", "DisabledStore", "JsonFileStore",
    "encode_game_state", "decode_game_state", "encode_statistics", "decode_statistics",
    "PersistenceGateway", "Codec",
]
