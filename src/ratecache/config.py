import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# Malformed values fall back to the default so importing the package never fails.
def env_number(name: str, default, cast=float):
    raw = os.getenv(name)
    if raw is None: return default
    try:
        return cast(raw)
    except ValueError:
        return default

@dataclass(frozen=True)
class CacheConfig:
    capacity: int = env_number("RATECACHE_CACHE_CAPACITY", 1000, int)
    ttl: float = env_number("RATECACHE_CACHE_TTL", 60.0) # seconds

@dataclass(frozen=True)
class LimiterConfig:
    rate_per_second: float = env_number("RATECACHE_RATE_PER_SECOND", 10.0)
    burst: int = env_number("RATECACHE_BURST", 20, int)

@dataclass(frozen=True)
class Config:
    cache: CacheConfig = CacheConfig()
    limiter: LimiterConfig = LimiterConfig()
    log_level: str = os.getenv("RATECACHE_LOG_LEVEL", "WARNING")

settings: Config = Config()
