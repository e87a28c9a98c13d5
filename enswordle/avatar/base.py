"""
Avatar capability seen by the game.

    resolve_avatar(name) -> image URL | None

Implementations keep everything network-bound (timeouts, content-type
checks, HTTP errors) on their side of this interface and never raise for
network trouble; the game then just shows no clue image. Nothing here
imports networking code.
"""

from __future__ import annotations

import re
from typing import Optional, Protocol

_ENS_LABEL = re.compile(r"[a-zA-Z0-9-]+")


class AvatarResolver(Protocol):
    def resolve_avatar(self, name: str) -> Optional[str]: ...


class NullAvatarResolver:
    """Resolver for offline play: there is never an avatar."""

    def resolve_avatar(self, name: str) -> Optional[str]:
        return None


def full_ens_name(name: str) -> str:
    """Append ".eth" unless the name already carries a TLD."""
    return name if "." in name else f"{name}.eth"


def validate_ens_name(name: str) -> bool:
    """
    Basic ENS name format check.
      - 3..63 characters once ".eth" is removed
      - letters, digits and hyphens only
      - no leading or trailing hyphen
    """
    if not name or not isinstance(name, str):
        return False
    base = name[:-4] if name.endswith(".eth") else name
    if not 3 <= len(base) <= 63:
        return False
    if not _ENS_LABEL.fullmatch(base):
        return False
    return not (base.startswith("-") or base.endswith("-"))
