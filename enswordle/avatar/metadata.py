"""
ENS metadata-service avatar resolver (network-bound).
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, Optional

import requests
from tqdm import tqdm

from .base import AvatarResolver, full_ens_name, validate_ens_name

logger = logging.getLogger(__name__)

METADATA_URL = "https://metadata.ens.domains/mainnet/avatar/{name}"


class MetadataAvatarResolver:
    """
    Resolve avatars through the ENS metadata service.

    The service serves the avatar image itself at a per-name URL, so
    resolution is a HEAD request: the URL is returned only when it answers
    2xx with an image/* content type.
    """

    def __init__(self, *, base_url: str = METADATA_URL, timeout: float = 3.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.timeout = float(timeout)
        self.session = session or requests.Session()

    def avatar_url(self, name: str) -> str:
        return self.base_url.format(name=full_ens_name(name))

    def is_image(self, url: str) -> bool:
        """HEAD the URL and check it serves an image."""
        try:
            r = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.warning("Avatar check failed for %s: %s", url, e)
            return False
        content_type = r.headers.get("content-type") or ""
        return r.ok and content_type.startswith("image/")

    def resolve_avatar(self, name: str) -> Optional[str]:
        if not validate_ens_name(full_ens_name(name)):
            logger.warning("Not a valid ENS name: %r", name)
            return None
        url = self.avatar_url(name)
        logger.debug("Fetching avatar for %s", full_ens_name(name))
        if self.is_image(url):
            return url
        logger.info("No usable avatar for %s", full_ens_name(name))
        return None


def batch_resolve(names: Iterable[str], resolver: AvatarResolver, *,
                  delay: float = 0.1, progress: bool = True) -> Dict[str, Optional[str]]:
    """
    Resolve many names one after another, pausing `delay` seconds between
    requests to stay clear of rate limits.

    Returns {name: url or None}.
    """
    names = list(names)
    results: Dict[str, Optional[str]] = {}
    for i, name in enumerate(tqdm(names, desc="avatars", unit="name", disable=not progress)):
        if i and delay > 0:
            time.sleep(delay)
        results[name] = resolver.resolve_avatar(name)
    found = sum(v is not None for v in results.values())
    logger.info("Batch avatar check complete: %d with avatar, %d without",
                found, len(results) - found)
    return results
