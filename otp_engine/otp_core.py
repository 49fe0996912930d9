"""
otp_core.py — Code Generator: HOTP theo RFC 4226.

Mục tiêu:
- Chứa các hàm thuần (pure functions) sinh mã OTP từ (secret, counter, digits).
- Không đọc clock, không I/O — Totp (totp.py) gọi vào đây.
- Kết quả phải giống hệt mọi implementation RFC 4226/6238 khác (Google
  Authenticator, pyotp, ...) với cùng input.

Lưu ý bảo mật:
- Thư viện dùng HMAC-SHA1 theo RFC4226/6238 (tương thích Google Authenticator).
- Không log secret hay mã OTP.
"""

import hashlib
import hmac
import logging
import struct

from .errors import InvalidSecret, require_positive_int
from .secret import SharedSecret

logger = logging.getLogger(__name__)

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # chuẩn: 6 chữ số
HASH_ALGORITHM = hashlib.sha1
MAX_COUNTER = 2 ** 64 - 1


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(i: int) -> bytes:
    """
    Chuyển integer (counter) sang 8-byte big-endian như RFC4226 yêu cầu.

    Ví dụ: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        ValueError: nếu counter nằm ngoài khoảng unsigned 64-bit
    """
    if not 0 <= i <= MAX_COUNTER:
        raise ValueError(f"counter out of range: {i}")
    return struct.pack(">Q", i)


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Áp dụng dynamic truncation theo RFC4226.

    - Lấy offset = last_byte & 0x0F
    - Lấy 4 bytes từ offset (big-endian), clear bit cao nhất
    - Trả về integer 31-bit (unsigned)
    """
    offset = hmac_digest[-1] & 0x0F
    (value,) = struct.unpack(">I", hmac_digest[offset:offset + 4])
    return value & 0x7FFFFFFF


def _hmac_digest(secret, msg: bytes) -> bytes:
    if isinstance(secret, SharedSecret):
        return hmac.new(secret.key, msg, HASH_ALGORITHM).digest()
    if isinstance(secret, str):
        # key decode tạm thời, wipe ngay sau khi dùng
        with SharedSecret.from_base32(secret) as owned:
            return hmac.new(owned.key, msg, HASH_ALGORITHM).digest()
    if not secret:
        raise InvalidSecret("secret key must not be empty")
    return hmac.new(secret, msg, HASH_ALGORITHM).digest()


def hotp(secret, counter: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Sinh mã HOTP theo RFC4226.

    Steps:
    1. Key = raw bytes (hoặc Base32-decode nếu secret là str)
    2. Message = 8-byte counter (big-endian)
    3. HMAC-SHA1(key, message)
    4. Dynamic truncate -> dbc
    5. otp = dbc % 10^digits
    6. Zero-pad để có đúng "digits" chữ số

    Arguments:
        secret: SharedSecret, raw key bytes, hoặc Base32 string
        counter: integer counter (0 <= counter < 2^64)
        digits: số chữ số OTP (mặc định 6)

    Trả về:
        str: mã HOTP dạng zero-padded, đúng `digits` ký tự

    Raises:
        InvalidSecret: secret rỗng / Base32 không hợp lệ
        InvalidConfiguration: digits không phải số nguyên dương
        ValueError: counter ngoài khoảng 64-bit
    """
    digits = require_positive_int("digits", digits)
    msg = int_to_bytes(counter)
    digest = _hmac_digest(secret, msg)

    dbc = dynamic_truncate(digest)
    logger.debug("HOTP: HMAC-SHA1(msg=counter=%d), digits=%d", counter, digits)
    return str(dbc % (10 ** digits)).zfill(digits)
