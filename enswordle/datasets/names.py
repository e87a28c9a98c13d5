"""
Curated ENS names: the pool of targets a round can be started with.

This is a collaborator of the game core, not part of it. The core only
ever receives the chosen name as a plain target string.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .io import DEFAULT_NAMES_PATH, read_json

logger = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "medium", "hard")
CATEGORIES = ("individual", "project", "generic")


@dataclass(frozen=True)
class CuratedName:
    name: str                     # ENS name without ".eth"
    difficulty: str               # easy | medium | hard
    category: str                 # individual | project | generic
    has_avatar: bool = False
    fallback_icon: Optional[str] = None
    added_date: str = ""          # ISO date
    last_validated: str = ""      # ISO date of last technical check

    @classmethod
    def from_dict(cls, d: Dict) -> "CuratedName":
        return cls(
            name=d["name"],
            difficulty=d.get("difficulty", "medium"),
            category=d.get("category", "generic"),
            has_avatar=bool(d.get("hasAvatar", False)),
            fallback_icon=d.get("fallbackIcon"),
            added_date=d.get("addedDate", ""),
            last_validated=d.get("lastValidated", ""),
        )


def load_curated_names(path: Path | str = DEFAULT_NAMES_PATH) -> List[CuratedName]:
    data = read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of names")
    return [CuratedName.from_dict(d) for d in data]


class NameProvider:
    """
    Random target selection over a curated list.

    Calling the provider returns a target string, which is all a game
    session needs from it.
    """

    def __init__(self, names: Sequence[CuratedName], rng: Optional[random.Random] = None):
        if not names:
            raise ValueError("No curated ENS names available")
        self.names: List[CuratedName] = list(names)
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: Path | str = DEFAULT_NAMES_PATH,
                  seed: Optional[int] = None) -> "NameProvider":
        return cls(load_curated_names(path), rng=random.Random(seed))

    def __call__(self) -> str:
        return self.random_name().name

    def random_name(self) -> CuratedName:
        return self.rng.choice(self.names)

    def random_name_by_difficulty(self, difficulty: str) -> CuratedName:
        pool = [n for n in self.names if n.difficulty == difficulty]
        if not pool:
            logger.warning("No %s names available, falling back to any difficulty", difficulty)
            return self.random_name()
        return self.rng.choice(pool)

    def random_name_by_category(self, category: str) -> CuratedName:
        pool = [n for n in self.names if n.category == category]
        if not pool:
            logger.warning("No %s names available, falling back to any category", category)
            return self.random_name()
        return self.rng.choice(pool)

    def is_curated(self, name: str) -> bool:
        return self.metadata(name) is not None

    def metadata(self, name: str) -> Optional[CuratedName]:
        name = name.lower()
        for n in self.names:
            if n.name.lower() == name:
                return n
        return None

    def fallback_name(self) -> CuratedName:
        """A dependable name for error paths: short and known to have an avatar."""
        for n in self.names:
            if n.name in ("vitalik", "ens") or (n.difficulty == "easy" and n.has_avatar):
                return n
        return self.names[0]

    def summary(self) -> Dict:
        names = self.names
        return {
            "total": len(names),
            "by_difficulty": {d: sum(n.difficulty == d for n in names) for d in DIFFICULTIES},
            "by_category": {c: sum(n.category == c for n in names) for c in CATEGORIES},
            "with_avatars": sum(n.has_avatar for n in names),
            "average_length": round(sum(len(n.name) for n in names) / len(names)),
        }
