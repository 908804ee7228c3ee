from loguru import logger as _loguru_logger

from ratecache import config
from ratecache.cache import LRUCache, TTLCache, LFUCache, LFUEntry
from ratecache.clock import MonotonicClock
from ratecache.decorators import cached, rate_limited
from ratecache.exceptions import RateCacheError, RateLimitExceeded
from ratecache.limiter import RateLimiter
from ratecache.logger import setup_logging

_loguru_logger.disable("ratecache")

# Defaults are read from config.settings at call time so a reloaded config applies.
def new_rate_limiter(rate_per_second: float | None = None, burst: int | None = None) -> RateLimiter:
    limits = config.settings.limiter
    return RateLimiter(
        limits.rate_per_second if rate_per_second is None else rate_per_second,
        limits.burst if burst is None else burst,
    )

def new_lru_cache(capacity: int | None = None) -> LRUCache:
    return LRUCache(config.settings.cache.capacity if capacity is None else capacity)

def new_ttl_cache(capacity: int | None = None, ttl: float | None = None) -> TTLCache:
    defaults = config.settings.cache
    return TTLCache(
        defaults.capacity if capacity is None else capacity,
        defaults.ttl if ttl is None else ttl,
    )

def new_lfu_cache(capacity: int | None = None) -> LFUCache:
    return LFUCache(config.settings.cache.capacity if capacity is None else capacity)

__all__ = [
    "RateLimiter",
    "LRUCache",
    "TTLCache",
    "LFUCache",
    "LFUEntry",
    "MonotonicClock",
    "RateCacheError",
    "RateLimitExceeded",
    "cached",
    "rate_limited",
    "setup_logging",
    "config",
    "new_rate_limiter",
    "new_lru_cache",
    "new_ttl_cache",
    "new_lfu_cache",
]
