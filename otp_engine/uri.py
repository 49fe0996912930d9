"""
uri.py — Tạo otpauth:// URI để import vào Google Authenticator / Authy.

    otpauth://totp/{account}?secret={secret}
    otpauth://totp/{issuer}:{account}?secret={secret}&issuer={issuer}

account / issuer được percent-encode (ví dụ '#' -> '%23'); secret giữ
nguyên dạng Base32 caller truyền vào, không encode lại.
"""

from typing import Optional
from urllib.parse import quote

URI_SCHEME = "otpauth"
OTP_TYPE = "totp"


def format_otpauth_uri(secret_b32: str, account: str, issuer: Optional[str] = None) -> str:
    label = quote(account, safe="")
    query = f"secret={secret_b32}"
    if issuer:
        label = f"{quote(issuer, safe='')}:{label}"
        query += f"&issuer={quote(issuer, safe='')}"
    return f"{URI_SCHEME}://{OTP_TYPE}/{label}?{query}"
