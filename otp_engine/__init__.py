"""
otp_engine package
==================

Sinh và xác minh OTP (HOTP/TOTP) theo chuẩn RFC 4226 & RFC 6238, tương
thích Google Authenticator.

──────────────────────────────────────────────
Giải thuật cốt lõi
──────────────────────────────────────────────
- HOTP: code = Truncate(HMAC-SHA1(key=secret, msg=counter)) mod 10^digits
- TOTP: HOTP với counter = floor(unix_time / step), step mặc định 30 giây.
- Verify: chấp nhận mã của step hiện tại và step ngay trước đó.

──────────────────────────────────────────────
Ví dụ sử dụng nhanh
──────────────────────────────────────────────
>>> from otp_engine import Totp
>>> totp = Totp("B2374TNIQ3HKC446")
>>> code = totp.now()
>>> totp.verify(code)
True
>>> totp.uri("john#doe")
'otpauth://totp/john%23doe?secret=B2374TNIQ3HKC446'
"""

import logging

from .clock import DEFAULT_TIME_STEP, Clock, IntervalSource
from .errors import InvalidConfiguration, InvalidSecret, OTPError
from .otp_core import DEFAULT_DIGITS, dynamic_truncate, hotp, int_to_bytes
from .secret import SharedSecret
from .totp import DELAY_WINDOW, Totp
from .uri import format_otpauth_uri

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Clock",
    "DEFAULT_DIGITS",
    "DEFAULT_TIME_STEP",
    "DELAY_WINDOW",
    "IntervalSource",
    "InvalidConfiguration",
    "InvalidSecret",
    "OTPError",
    "SharedSecret",
    "Totp",
    "dynamic_truncate",
    "format_otpauth_uri",
    "hotp",
    "int_to_bytes",
]
