"""Response caching and the load/refresh cycle for surfreport.

Provides an in-memory network-first response cache and the concurrent
load cycle that combines the report page with tide predictions.

A single load can be run from the command line:
    python -m surfreport.cache.refresh
"""

from surfreport.cache.responses import CACHE_VERSION, CachedResponse, ResponseCache, request_key

__all__ = [
    "CACHE_VERSION",
    "CachedResponse",
    "ResponseCache",
    "request_key",
]
