"""
Named in-memory caches on top of Django's cache framework.

LocMemCache cannot delete by prefix, so each cache name carries a generation
counter. Evicting a whole cache bumps its generation; stale entries are then
never read again and age out with the process.
"""

from django.core.cache import cache

EXOPLANET_SUMMARIES = "exoplanetSummaries"
EXOPLANET_DETAILS = "exoplanetDetails"
USER_FAVORITES = "userFavorites"


def _generation(name: str) -> int:
    return cache.get_or_set(f"cache-generation:{name}", 1, timeout=None)


def make_key(name: str, *parts) -> str:
    suffix = ":".join(str(part) for part in parts)
    return f"{name}:{_generation(name)}:{suffix}"


def cached(name: str, parts, compute):
    """Return the cached value for ``parts`` in cache ``name``, computing it on a miss."""
    key = make_key(name, *parts)
    value = cache.get(key)
    if value is None:
        value = compute()
        cache.set(key, value, timeout=None)
    return value


def evict(name: str, *parts):
    cache.delete(make_key(name, *parts))


def evict_all(*names: str):
    for name in names:
        key = f"cache-generation:{name}"
        try:
            cache.incr(key)
        except ValueError:
            cache.set(key, 2, timeout=None)
