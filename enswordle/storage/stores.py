"""
Key-value backends behind the persistence gateway.

All backends store raw strings (serialized JSON documents) and signal
"cannot store anything at all" with StorageUnavailable. Anything finer
grained (one bad record) is the gateway's business.
"""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from enswordle.errors import StorageUnavailable

_KEY_RE = re.compile(r"[A-Za-z0-9._-]+")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def is_available(self) -> bool: ...


class MemoryStore:
    """Process-local store; also the natural fake for tests."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def is_available(self) -> bool:
        return True


class DisabledStore:
    """A store that is never usable (e.g. persistence switched off)."""

    def get(self, key: str) -> Optional[str]:
        raise StorageUnavailable("storage disabled")

    def set(self, key: str, value: str) -> None:
        raise StorageUnavailable("storage disabled")

    def delete(self, key: str) -> None:
        raise StorageUnavailable("storage disabled")

    def is_available(self) -> bool:
        return False


class JsonFileStore:
    """
    One UTF-8 file per key: <directory>/<key>.json.

    Writes go to a temp file in the same directory and are moved into
    place with os.replace, so a crash mid-write never leaves a torn record.
    """

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _KEY_RE.fullmatch(key):
            raise ValueError(f"invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def is_available(self) -> bool:
        """Probe by writing and removing a scratch entry."""
        try:
            self.set("__test__", "test")
            self.delete("__test__")
        except (StorageUnavailable, OSError):
            return False
        return True

    def get(self, key: str) -> Optional[str]:
        p = self._path(key)
        try:
            return p.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageUnavailable(f"cannot read {p}: {e}") from e

    def set(self, key: str, value: str) -> None:
        p = self._path(key)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=p.parent, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp, p)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageUnavailable(f"cannot write {p}: {e}") from e

    def delete(self, key: str) -> None:
        p = self._path(key)
        try:
            p.unlink(missing_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"cannot delete {p}: {e}") from e
