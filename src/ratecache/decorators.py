import inspect
import functools
from typing import Callable, Hashable, Optional

from loguru import logger

from ratecache.exceptions import RateLimitExceeded
from ratecache.limiter import RateLimiter

def default_key(*args, **kwargs) -> Hashable:
    return (args, frozenset(kwargs.items())) if kwargs else args

# (Brief) Memoizes the decorated function through the given cache (LRUCache, TTLCache or LFUCache).
#         Eviction and expiry are whatever the cache does; a None result is cached like any other.
# (Usage) Works on plain and async functions. Arguments must be hashable unless `key` is given.
#
# (Params)
#   cache - any object with lookup(key) -> (value, found) and put(key, value)
#   key (callable) - builds the cache key from the call arguments
#
def cached(cache, key: Optional[Callable[..., Hashable]] = None):
    make_key = key or default_key

    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                k = make_key(*args, **kwargs)
                value, found = cache.lookup(k)
                if found: return value

                value = await func(*args, **kwargs)
                cache.put(k, value)
                return value
            async_wrapper.cache = cache
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            k = make_key(*args, **kwargs)
            value, found = cache.lookup(k)
            if found: return value

            value = func(*args, **kwargs)
            cache.put(k, value)
            return value
        wrapper.cache = cache
        return wrapper
    return decorator

# (Brief) Takes one token from the limiter before every call. Raises RateLimitExceeded when the bucket is empty,
#         the wrapped function is not called in that case.
#
# (Params)
#   limiter (RateLimiter) - shared bucket, may guard several functions at once
#
def rate_limited(limiter: RateLimiter):
    def reject(func):
        logger.debug("{} rejected by {!r}", func.__qualname__, limiter)
        return RateLimitExceeded(func.__qualname__, limiter.rate, limiter.burst)

    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                if not limiter.try_acquire(): raise reject(func)
                return await func(*args, **kwargs)
            async_wrapper.limiter = limiter
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not limiter.try_acquire(): raise reject(func)
            return func(*args, **kwargs)
        wrapper.limiter = limiter
        return wrapper
    return decorator
