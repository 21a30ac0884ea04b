# Sigil
"""
From-scratch SHA-256 and HMAC-SHA256 with an endianness-aware byte buffer.

Modules:
- core: ByteSequence, byte helpers, hex/Base64URL encodings, errors
- core_crypto: SHA-256 (FIPS 180-4)
- jwa: HMAC-SHA256 / HS256 (RFC 2104, RFC 4231)
"""

from .core import (
    ByteOrder,
    ByteSequence,
    SigilError,
    InvalidArgumentError,
    LengthMismatchError,
    OffsetOutOfRangeError,
)
from .core_crypto import SHA256Engine, sha256, sha256_hex
from .jwa import HS256Algorithm, hmac_sha256, hmac_sha256_hex, verify_hmac_sha256

__version__ = "0.1.0"

__all__ = [
    'ByteOrder',
    'ByteSequence',
    'SigilError',
    'InvalidArgumentError',
    'LengthMismatchError',
    'OffsetOutOfRangeError',
    'SHA256Engine',
    'sha256',
    'sha256_hex',
    'HS256Algorithm',
    'hmac_sha256',
    'hmac_sha256_hex',
    'verify_hmac_sha256',
]
