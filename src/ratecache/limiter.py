import threading

from loguru import logger

from ratecache.clock import default_clock

MIN_RATE = 0.0001
MIN_BURST = 1

# Token bucket. Tokens are refilled lazily on every try_acquire() call:
# elapsed * rate is added, capped at burst. Each admitted call takes one token.
#
# (Params)
#   rate_per_second (float) - tokens added per second, floored at MIN_RATE
#   burst_capacity (int) - max tokens held, floored at MIN_BURST
#   clock - object with now() -> float seconds, monotonic
#
class RateLimiter:
    def __init__(self, rate_per_second: float, burst_capacity: int, clock=None):
        if rate_per_second < MIN_RATE or burst_capacity < MIN_BURST:
            logger.debug("RateLimiter({}, {}) clamped to minimums", rate_per_second, burst_capacity)

        self.rate = max(MIN_RATE, float(rate_per_second))
        self.burst = max(MIN_BURST, int(burst_capacity))
        self._clock = clock or default_clock
        self._lock = threading.Lock()
        self._tokens: float = float(self.burst)
        self._last_refill: float = self._clock.now()

    def _refill(self):
        now = self._clock.now()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
        self._last_refill = now

    def try_acquire(self) -> bool:
        with self._lock:
            self._refill()
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False

    # Current token count without refilling.
    @property
    def tokens(self) -> float:
        with self._lock:
            return self._tokens

    def __repr__(self):
        return f"RateLimiter(rate={self.rate}, burst={self.burst})"
