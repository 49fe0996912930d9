"""
clock.py — Chuyển wall-clock time thành time-step counter (RFC 6238).

counter = floor(unix_seconds / interval)

Clock là một capability được inject vào Totp: production dùng Clock mặc
định (đọc time.time()), test thay bằng Mock(spec=Clock) trả về counter
cố định.
"""

import logging
import time
from typing import Protocol

from .errors import require_positive_int

logger = logging.getLogger(__name__)

DEFAULT_TIME_STEP = 30  # TOTP step (giây)


class IntervalSource(Protocol):
    """Bất kỳ object nào có current_interval() đều dùng được làm clock cho Totp."""

    def current_interval(self) -> int:
        ...


class Clock:
    """
    Clock dựa trên system time.

    Arguments:
        interval: độ dài một time step (giây), mặc định 30.
    Raises:
        InvalidConfiguration: nếu interval không phải số nguyên dương.
    """

    def __init__(self, interval: int = DEFAULT_TIME_STEP):
        self._interval = require_positive_int("interval", interval)

    @property
    def interval(self) -> int:
        return self._interval

    def _now(self) -> int:
        return int(time.time())

    def current_interval(self) -> int:
        """Trả về counter hiện tại: floor(now / interval)."""
        counter = self._now() // self._interval
        logger.debug("Clock: interval=%ss, counter=%d", self._interval, counter)
        return counter

    def remaining_seconds(self) -> int:
        """Số giây còn lại trước khi sang step kế tiếp."""
        return self._interval - (self._now() % self._interval)

    def __repr__(self) -> str:
        return f"Clock(interval={self._interval})"
