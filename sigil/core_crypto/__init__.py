# Core Cryptography Module
"""
Core cryptographic implementations including:
- SHA-256 hashing
"""

from .sha256 import SHA256Engine, pad_message, sha256, sha256_hex, sha256_string

__all__ = [
    'SHA256Engine',
    'pad_message',
    'sha256',
    'sha256_hex',
    'sha256_string',
]
