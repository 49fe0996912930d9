"""
errors.py — Các exception của otp_engine.

Cả hai lỗi cấu hình / secret đều kế thừa ValueError, để code cũ bắt
ValueError("Invalid Base32 secret") vẫn hoạt động bình thường.
"""


class OTPError(Exception):
    """Base class cho mọi lỗi của otp_engine."""


class InvalidConfiguration(OTPError, ValueError):
    """Step duration hoặc số chữ số không hợp lệ (<= 0, không phải int)."""


class InvalidSecret(OTPError, ValueError):
    """Secret rỗng, không decode được Base32, hoặc đã bị wipe."""


def require_positive_int(name: str, value) -> int:
    """Trả về value nếu là int > 0, ngược lại raise InvalidConfiguration."""
    # bool là subclass của int, nhưng True/False không phải cấu hình hợp lệ
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    return value
