import time

# Monotonic time source shared by the limiter and the caches.
# Anything with a now() -> float (seconds) method can replace it.
class MonotonicClock:
    def now(self) -> float:
        return time.monotonic()

default_clock = MonotonicClock()
