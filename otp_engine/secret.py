"""
secret.py — Giữ shared secret (key bytes) trong một buffer có thể xóa.

- Decode Base32 giống Google Authenticator: bỏ khoảng trắng và dấu '-',
  bỏ padding '=', chuyển sang chữ hoa.
- Key bytes nằm trong bytearray, wipe() ghi đè bằng 0.
- Không bao giờ in / log key bytes; repr() chỉ hiện độ dài.
"""

import base64
import logging

from .errors import InvalidSecret

logger = logging.getLogger(__name__)


def normalize_base32(encoded: str) -> str:
    """
    Chuẩn hóa chuỗi Base32 do user nhập.

    Ví dụ: " jbsw-y3dp ehpk3pxp== " -> "JBSWY3DPEHPK3PXP"
    """
    cleaned = encoded.strip().replace("-", "").replace(" ", "")
    return cleaned.rstrip("=").upper()


def zero_buffer(buffer: bytearray) -> None:
    """Ghi đè toàn bộ buffer bằng 0 (in place)."""
    for i in range(len(buffer)):
        buffer[i] = 0


def decode_base32(encoded: str) -> bytearray:
    """
    Decode Base32 secret -> bytearray.

    Raises:
        InvalidSecret: secret rỗng hoặc không phải Base32 hợp lệ
    """
    if not isinstance(encoded, str):
        raise InvalidSecret("Base32 secret must be a string")
    cleaned = normalize_base32(encoded)
    if not cleaned:
        raise InvalidSecret("Base32 secret is empty")
    # b32decode yêu cầu độ dài là bội số của 8
    padded = cleaned + "=" * (-len(cleaned) % 8)
    try:
        raw = base64.b32decode(padded)
    except ValueError as e:
        raise InvalidSecret("Invalid Base32 secret") from e
    if not raw:
        raise InvalidSecret("Base32 secret decodes to an empty key")
    return bytearray(raw)


class SharedSecret:
    """
    Key material cho HMAC, giữ trong bytearray có thể wipe.

    Dùng như context manager để tự động xóa key khi ra khỏi block:

        with SharedSecret.from_base32("JBSWY3DPEHPK3PXP") as secret:
            code = hotp(secret.key, 0)
    """

    def __init__(self, key):
        if not key:
            raise InvalidSecret("secret key must not be empty")
        self._key = bytearray(key)
        self._wiped = False

    @classmethod
    def from_base32(cls, encoded: str) -> "SharedSecret":
        raw = decode_base32(encoded)
        try:
            return cls(raw)
        finally:
            zero_buffer(raw)

    @property
    def key(self) -> bytearray:
        if self._wiped:
            raise InvalidSecret("secret material has been wiped")
        return self._key

    @property
    def wiped(self) -> bool:
        return self._wiped

    def wipe(self) -> None:
        """Ghi đè key bằng 0. Gọi nhiều lần không lỗi."""
        if self._wiped:
            return
        zero_buffer(self._key)
        self._wiped = True
        logger.debug("SharedSecret: wiped %d-byte key", len(self._key))

    def __len__(self) -> int:
        return len(self._key)

    def __enter__(self) -> "SharedSecret":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __repr__(self) -> str:
        state = "wiped" if self._wiped else f"{len(self._key)} bytes"
        return f"<SharedSecret {state}>"
