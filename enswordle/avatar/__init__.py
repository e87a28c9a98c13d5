# Only the networking-free capability is exported here; the HTTP resolver
# lives in enswordle.avatar.metadata and is imported explicitly.
from .base import AvatarResolver, NullAvatarResolver, full_ens_name, validate_ens_name

__all__ = ["AvatarResolver", "NullAvatarResolver", "full_ens_name", "validate_ens_name"]
