import time
from unittest.mock import Mock

import pytest

from otp_engine import Clock, Totp

SHARED_SECRET = "B2374TNIQ3HKC446"

# RFC 4226 Appendix D / RFC 6238 Appendix B: ASCII "12345678901234567890"
RFC_SECRET_BYTES = b"12345678901234567890"
RFC_SECRET_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def base_time():
    """Wall-clock seconds frozen once per test."""
    return int(time.time())


@pytest.fixture
def elapsed(base_time):
    """Counter the default 30s clock would report `seconds` after base_time."""
    def _elapsed(seconds: int) -> int:
        return (base_time + seconds) // 30
    return _elapsed


@pytest.fixture
def clock(elapsed):
    mock_clock = Mock(spec=Clock)
    mock_clock.current_interval.return_value = elapsed(0)
    return mock_clock


@pytest.fixture
def totp(clock):
    return Totp(SHARED_SECRET, clock)
