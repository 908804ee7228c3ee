import time

from ratecache import RateLimiter, new_rate_limiter


class TestRateLimiter:
    def test_burst_then_reject(self, clock):
        limiter = RateLimiter(10.0, 5, clock=clock)
        assert [limiter.try_acquire() for _ in range(5)] == [True] * 5
        assert limiter.try_acquire() is False

    def test_refill_after_about_100ms(self, clock):
        limiter = RateLimiter(10.0, 5, clock=clock)
        for _ in range(5):
            limiter.try_acquire()
        assert not limiter.try_acquire()

        clock.advance(0.11)
        assert limiter.try_acquire()
        assert not limiter.try_acquire()

    def test_partial_token_is_not_enough(self, clock):
        limiter = RateLimiter(1.0, 1, clock=clock)
        assert limiter.try_acquire()
        clock.advance(0.5)
        assert not limiter.try_acquire()
        clock.advance(0.5)
        assert limiter.try_acquire()

    def test_tokens_capped_at_burst(self, clock):
        limiter = RateLimiter(100.0, 3, clock=clock)
        clock.advance(3600)
        limiter.try_acquire()
        assert limiter.tokens == 2.0
        assert [limiter.try_acquire() for _ in range(3)] == [True, True, False]

    def test_tokens_stay_in_bounds(self, clock):
        limiter = RateLimiter(7.5, 4, clock=clock)
        for step in range(500):
            clock.advance((step % 7) * 0.013)
            limiter.try_acquire()
            assert 0.0 <= limiter.tokens <= limiter.burst

    def test_rate_conformance(self, clock):
        rate, burst, duration = 20.0, 5, 3.0
        limiter = RateLimiter(rate, burst, clock=clock)
        admitted = 0
        elapsed = 0.0
        while elapsed < duration:
            admitted += limiter.try_acquire()
            clock.advance(0.001)
            elapsed += 0.001
        assert admitted <= burst + rate * duration + 1
        assert admitted >= rate * duration

    def test_clamps_invalid_arguments(self, clock):
        limiter = RateLimiter(0, -3, clock=clock)
        assert limiter.rate == 0.0001
        assert limiter.burst == 1
        assert limiter.try_acquire()
        assert not limiter.try_acquire()

    def test_negative_rate_clamped(self):
        limiter = RateLimiter(-5.0, 2)
        assert limiter.rate > 0

    def test_real_clock_refill(self):
        limiter = new_rate_limiter(10.0, 5)
        assert all(limiter.try_acquire() for _ in range(5))
        assert not limiter.try_acquire()
        time.sleep(0.15)
        assert limiter.try_acquire()

    def test_clock_going_backwards_does_not_drain(self, clock):
        limiter = RateLimiter(10.0, 5, clock=clock)
        limiter.try_acquire()
        limiter.try_acquire()
        assert limiter.tokens == 3.0

        clock.advance(-30.0)
        assert limiter.try_acquire()
        assert limiter.tokens == 2.0

        limiter.try_acquire()
        limiter.try_acquire()
        clock.advance(-1.0)
        assert not limiter.try_acquire()
        assert limiter.tokens == 0.0
