from dataclasses import dataclass

@dataclass
class RateCacheError(Exception):
    name: str
    message: str
    info: str

    def __str__(self):
        return f"{self.name}: {self.message} ({self.info})"

class RateLimitExceeded(RateCacheError):
    def __init__(self, func_name: str = "", rate: float = 0.0, burst: int = 0):
        super().__init__("RateLimitExceeded", "Call rejected by rate limiter", f"{func_name}: rate={rate}/s burst={burst}")
