"""
totp.py — Verifier: sinh và xác minh mã TOTP (RFC 6238) dựa trên Clock.

Totp giữ cấu hình bất biến (secret, clock, digits) từ lúc khởi tạo. Mỗi lần
gọi now() / verify() đều đọc lại clock, không cache mã.

Cửa sổ xác minh: counter hiện tại và DELAY_WINDOW step trước đó, tức là
{c - 1, c} với mặc định. Không chấp nhận mã của step tương lai (c + 1),
giống hành vi của Google Authenticator reference implementation.
"""

import hmac
import logging
from typing import Optional

from .clock import Clock, IntervalSource
from .errors import require_positive_int
from .otp_core import DEFAULT_DIGITS, hotp
from .secret import SharedSecret
from .uri import format_otpauth_uri

logger = logging.getLogger(__name__)

DELAY_WINDOW = 1  # số step trong quá khứ vẫn chấp nhận


class Totp:
    """
    TOTP generator / verifier.

    Arguments:
        secret: Base32 secret (ví dụ "B2374TNIQ3HKC446")
        clock: object có current_interval() (Clock hoặc test double); mặc định Clock() với step 30s
        digits: số chữ số OTP (mặc định 6)

    Raises:
        InvalidSecret: secret rỗng hoặc không phải Base32 hợp lệ
        InvalidConfiguration: digits không phải số nguyên dương
    """

    def __init__(self, secret: str, clock: Optional[IntervalSource] = None, digits: int = DEFAULT_DIGITS):
        self._digits = require_positive_int("digits", digits)
        self._secret = SharedSecret.from_base32(secret)
        self._encoded = secret
        self._clock = clock if clock is not None else Clock()

    @property
    def digits(self) -> int:
        return self._digits

    @property
    def clock(self) -> IntervalSource:
        return self._clock

    def uri(self, name: str, issuer: Optional[str] = None) -> str:
        """otpauth:// URI cho account `name`, dùng secret dạng đã truyền vào."""
        return format_otpauth_uri(self._encoded, name, issuer)

    def at(self, interval: int) -> str:
        """Mã OTP tại một counter cụ thể."""
        return hotp(self._secret, interval, self._digits)

    def now(self) -> str:
        """Mã OTP cho counter hiện tại của clock."""
        return self.at(self._clock.current_interval())

    def verify(self, otp) -> bool:
        """
        Xác minh mã user nhập.

        So sánh (constant-time) với mã tại counter hiện tại và DELAY_WINDOW
        step trước đó. Mã sai định dạng (không phải str, sai độ dài, không
        phải số) chỉ đơn giản trả về False, không raise.
        """
        if not isinstance(otp, str):
            return False
        candidate = otp.encode("utf-8", "surrogatepass")
        current = self._clock.current_interval()

        matched = False
        for offset in range(DELAY_WINDOW, -1, -1):
            counter = current - offset
            if counter < 0:
                continue
            expected = self.at(counter).encode("ascii")
            if hmac.compare_digest(expected, candidate):
                matched = True
        logger.debug("TOTP verify: counter=%d, window=%d, valid=%s", current, DELAY_WINDOW, matched)
        return matched

    def wipe(self) -> None:
        """Xóa key material; sau đó now() / verify() sẽ raise InvalidSecret."""
        self._secret.wipe()

    def __enter__(self) -> "Totp":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __repr__(self) -> str:
        return f"Totp(digits={self._digits}, clock={self._clock!r})"
