"""Cache system for AniList GraphQL queries.

Lookups run in worker threads (see ``render.media``), so every access to the
cache and its counters goes through ``_LOCK``.
"""

import json
import logging
import time
import hashlib
import threading
from typing import Dict, Any, Optional, Tuple

from .http_client import http_post

logger = logging.getLogger(__name__)

# Constants
CACHE_TTL = 300  # 5 min
ANILIST_GQL = "https://graphql.anilist.co"

# Cache storage
_CACHE: Dict[str, Tuple[float, dict]] = {}
_CACHE_HITS = 0
_CACHE_MISSES = 0
_LOCK = threading.Lock()


def _cache_key_gql(query: str, variables: dict) -> str:
    """Generate a cache key for GraphQL queries."""
    hq = hashlib.sha1(query.encode("utf-8")).hexdigest()
    hv = hashlib.sha1(json.dumps(variables, sort_keys=True, ensure_ascii=False).encode("utf-8")).hexdigest()
    return f"GQL|{hq}|{hv}"


def _cache_get(k: str) -> Optional[dict]:
    """Get item from cache if not expired."""
    global _CACHE_HITS, _CACHE_MISSES
    with _LOCK:
        it = _CACHE.get(k)
        if it is not None and it[0] < time.time():
            _CACHE.pop(k, None)
            it = None
        if it is None:
            _CACHE_MISSES += 1
            return None
        _CACHE_HITS += 1
        return it[1]


def _cache_set(k: str, data: dict, ttl: int = CACHE_TTL) -> None:
    now = time.time()
    with _LOCK:
        for stale in [key for key, (exp, _) in _CACHE.items() if exp < now]:
            del _CACHE[stale]
        _CACHE[k] = (now + ttl, data)


def gql(query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
    """Execute an AniList GraphQL query, serving repeated ones from the cache."""
    k = _cache_key_gql(query, variables)
    cached = _cache_get(k)
    if cached is not None:
        return cached

    logger.debug("AniList query %s", variables)
    r = http_post(ANILIST_GQL, json={"query": query, "variables": variables},
                  headers={"Content-Type": "application/json"})
    data = r.json()

    errors = data.get("errors")
    if errors:
        message = json.dumps(errors, ensure_ascii=False)
        if any(e.get("status") == 404 for e in errors):
            raise LookupError(message)
        raise RuntimeError(message)

    out = data["data"]
    _cache_set(k, out)
    return out


def cache_info() -> Dict[str, Any]:
    """Get cache statistics."""
    with _LOCK:
        return {
            "hits": _CACHE_HITS,
            "misses": _CACHE_MISSES,
            "size": len(_CACHE),
            "ttlSec": CACHE_TTL
        }


def cache_clear() -> int:
    """Clear cache and return number of cleared items."""
    with _LOCK:
        n = len(_CACHE)
        _CACHE.clear()
    return n
