"""Network-first response cache with offline fallback.

Every GET goes to the network first. A successful response is kept in
memory under its request identity; when the network is unreachable the
kept copy is served instead. Nothing is written to disk, so the cache only
lives as long as the process. Entries are bounded by an LRU policy, since
date-ranged requests (tides) get a new key every day.
"""

import json
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import requests
from cachetools import LRUCache

logger = logging.getLogger(__name__)

# Bump to invalidate entries stored by an older layout of the cache
CACHE_VERSION = "surfreport-v4"

# Least recently used entries are dropped beyond this
MAX_ENTRIES = 32

RequestKey = tuple[str, str, tuple[tuple[str, str], ...]]


@dataclass
class CachedResponse:
    """Snapshot of an HTTP response.

    Attributes:
        url: Request URL
        status_code: HTTP status code
        text: Decoded body
        fetched_at: When the body was received from the network
        from_cache: True when served from the cache instead of the network
    """

    url: str
    status_code: int
    text: str
    fetched_at: datetime = field(default_factory=datetime.now)
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        """Raise requests.HTTPError for a non-success status."""
        if not self.ok:
            raise requests.HTTPError(
                f"{self.status_code} error for url: {self.url}"
            )

    @classmethod
    def from_response(cls, response: requests.Response) -> "CachedResponse":
        return cls(
            url=response.url,
            status_code=response.status_code,
            text=response.text,
        )


def request_key(url: str, params: Optional[dict] = None, version: str = CACHE_VERSION) -> RequestKey:
    """Identity of a GET request: cache version, URL and sorted params."""
    items = tuple(sorted((str(k), str(v)) for k, v in (params or {}).items()))
    return version, url, items


class ResponseCache:
    """In-memory network-first cache for GET requests.

    Example:
        >>> cache = ResponseCache()
        >>> response = cache.get("https://example.com/", timeout=10)
        >>> response.from_cache
        False
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        version: str = CACHE_VERSION,
        max_entries: int = MAX_ENTRIES,
    ):
        """Initialize the cache.

        Args:
            session: requests session to send through (a new one by default)
            version: Cache version, part of every request key
            max_entries: Number of responses kept before the least recently
                used one is dropped
        """
        self.session = session or requests.Session()
        self.version = version
        self._entries: LRUCache = LRUCache(maxsize=max_entries)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: RequestKey) -> bool:
        return key in self._entries

    def get(
        self,
        url: str,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
        timeout: Optional[float] = None,
    ) -> CachedResponse:
        """Fetch from the network, falling back to the cached copy.

        Non-success responses are returned as received and not stored.

        Raises:
            requests.RequestException: If the network fails and nothing is cached
        """
        key = request_key(url, params, self.version)
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=timeout)
        except requests.RequestException as e:
            with self._lock:
                cached = self._entries.get(key)
            if cached is None:
                raise
            logger.warning(f"Network failed for {url} ({e}); serving cached copy "
                           f"from {cached.fetched_at:%Y-%m-%d %H:%M:%S}")
            return CachedResponse(
                url=cached.url,
                status_code=cached.status_code,
                text=cached.text,
                fetched_at=cached.fetched_at,
                from_cache=True,
            )

        snapshot = CachedResponse.from_response(response)
        if snapshot.ok:
            with self._lock:
                self._entries[key] = snapshot
        return snapshot

    def clear(self) -> None:
        """Drop all cached entries."""
        with self._lock:
            self._entries.clear()
