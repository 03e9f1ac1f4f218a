import pytest

from constructora.ai.rate_limit import FixedWindowRateLimiter
from constructora.core.exceptions import RateLimitError


def test_limit_per_key_and_window_reset():
    now = [0.0]
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=600, clock=lambda: now[0])

    limiter.hit("1.1.1.1")
    limiter.hit("1.1.1.1")
    with pytest.raises(RateLimitError) as exc:
        limiter.hit("1.1.1.1")
    assert str(exc.value) == "Rate limit exceeded. Try again later."

    limiter.hit("2.2.2.2")

    now[0] = 600.0
    limiter.hit("1.1.1.1")


def test_expired_buckets_are_dropped():
    now = [0.0]
    limiter = FixedWindowRateLimiter(max_requests=5, window_seconds=600, clock=lambda: now[0])

    for i in range(100):
        limiter.hit(f"10.0.0.{i}")
    assert limiter.tracked_keys() == 100

    now[0] = 601.0
    limiter.hit("10.0.1.1")

    assert limiter.tracked_keys() == 1
