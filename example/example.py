import asyncio
import time

from ratecache import (
    RateLimitExceeded, cached, new_lfu_cache, new_rate_limiter, new_ttl_cache, rate_limited, setup_logging,
)

limiter = new_rate_limiter(50.0, 10)

@rate_limited(limiter)
@cached(new_ttl_cache(256, 5.0))
async def find_user(id: int) -> dict:
    await asyncio.sleep(0.01) # pretend I/O
    return {"id": id, "tag": f"user-{id}"}

async def main():
    setup_logging("INFO")

    start = time.perf_counter()
    served, rejected = 0, 0
    for i in range(5000):
        try:
            await find_user(i % 3)
            served += 1
        except RateLimitExceeded:
            rejected += 1
    end = time.perf_counter()
    print(f"served={served} rejected={rejected} in {end - start:.4f} seconds")

    hot = new_lfu_cache(2)
    hot["a"], hot["b"] = 1, 2
    hot.get("a")
    hot["c"] = 3
    print(f"lfu keeps a={hot.get('a')} c={hot.get('c')}, b evicted -> {hot.get('b')}")

if __name__ == "__main__":
    asyncio.run(main())
