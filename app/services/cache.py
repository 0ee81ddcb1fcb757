# app/services/cache.py
from __future__ import annotations
import asyncio
import functools
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

# In-process TTL caches by namespace
# value = (expires_at_epoch, stored_at_epoch, data)
_CACHES: Dict[str, Dict[Tuple[Any, ...], Tuple[float, int, Any]]] = {}
# sync routes run in the threadpool while invalidation can come from any worker
_LOCK = threading.Lock()

def _cache_for(namespace: str) -> Dict[Tuple[Any, ...], Tuple[float, int, Any]]:
    with _LOCK:
        return _CACHES.setdefault(namespace, {})

def _now() -> float:
    return time.time()

def _set_headers(response, status: str, stored_at: int, ttl_seconds: int) -> None:
    if response is None:
        return
    response.headers["X-Cache"] = status
    response.headers["X-Cache-Stored-At"] = str(stored_at)
    response.headers["Cache-Control"] = f"private, max-age={ttl_seconds}"

def cache_route(
    *,
    namespace: str,
    ttl_seconds: int | Callable[[], int],
    key_builder: Callable[..., Tuple[Any, ...]],
):
    """
    Decorator for FastAPI routes (sync or async).
    - Caches the returned data by a computed key.
    - Sets X-Cache: HIT|MISS, X-Cache-Stored-At, and Cache-Control on the Response if present in kwargs.
    - ttl_seconds may be a callable so the TTL follows settings read at request time.
    - A TTL of 0 disables caching for the route.
    """
    cache = _cache_for(namespace)

    def _lookup(args, kwargs):
        ttl = ttl_seconds() if callable(ttl_seconds) else ttl_seconds
        key = key_builder(*args, **kwargs)
        now = _now()
        entry = None
        if ttl > 0:
            with _LOCK:
                entry = cache.get(key)
                if entry and entry[0] <= now:
                    cache.pop(key, None)
                    entry = None
        return ttl, key, now, entry

    def _hit(entry, ttl, response):
        _, stored_at, data = entry
        _set_headers(response, "HIT", stored_at, ttl)
        return data

    def _store(key, now, ttl, data, response):
        stored_at = int(now)
        if ttl > 0:
            with _LOCK:
                cache[key] = (now + ttl, stored_at, data)
        _set_headers(response, "MISS", stored_at, ttl)
        return data

    def decorator(fn: Callable):
        # wrapper keeps fn's sync/async nature so FastAPI dispatches it the same way
        if asyncio.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                response = kwargs.get("response")  # FastAPI Response if included in signature
                ttl, key, now, entry = _lookup(args, kwargs)
                if entry:
                    return _hit(entry, ttl, response)
                # MISS → call downstream
                return _store(key, now, ttl, await fn(*args, **kwargs), response)

            return async_wrapper

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            response = kwargs.get("response")
            ttl, key, now, entry = _lookup(args, kwargs)
            if entry:
                return _hit(entry, ttl, response)
            return _store(key, now, ttl, fn(*args, **kwargs), response)

        return wrapper
    return decorator

def invalidate(namespace: str, predicate: Optional[Callable[[Tuple[Any, ...]], bool]] = None) -> int:
    """Drop entries of one namespace (all of them when no predicate). Returns how many were dropped."""
    with _LOCK:
        cache = _CACHES.get(namespace)
        if not cache:
            return 0
        doomed = [k for k in cache if predicate is None or predicate(k)]
        for k in doomed:
            cache.pop(k, None)
        return len(doomed)

def clear_all() -> None:
    with _LOCK:
        for cache in _CACHES.values():
            cache.clear()

# ------------- common key helpers -------------

def key_tuple(*parts: Any) -> Tuple[Any, ...]:
    return tuple(parts)
