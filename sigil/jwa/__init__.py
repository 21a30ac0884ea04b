# JSON Web Algorithms Module
"""
MAC algorithms:
- HMAC-SHA256 (HS256) - hmac_sha256.py

Security features:
- Key normalization to the SHA-256 block size
- Constant-time tag verification
- Cryptographically secure key generation
"""

from .hmac_sha256 import (
    HS256Algorithm,
    generate_key,
    hmac_sha256,
    hmac_sha256_hex,
    normalize_key,
    verify_hmac_sha256,
)

__all__ = [
    'HS256Algorithm',
    'generate_key',
    'hmac_sha256',
    'hmac_sha256_hex',
    'normalize_key',
    'verify_hmac_sha256',
]
