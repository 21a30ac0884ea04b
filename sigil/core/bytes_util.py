"""
Byte Helpers

Stateless helpers over plain ``bytes`` used by the digest and MAC code:
right padding, big-endian word decoding, tag comparison and key material.

Security considerations:
- constant_time_equals uses hmac.compare_digest so the comparison time does
  not depend on where the inputs differ
- random_bytes draws from the platform CSPRNG (secrets module)
"""

import hmac
import secrets
from typing import Optional

from .errors import InvalidArgumentError


def right_pad(src: bytes, length: int, pad: int = 0x00) -> bytes:
    """
    Pad ``src`` on the right with ``pad`` up to ``length`` bytes.

    Inputs already at or beyond ``length`` are truncated to it.

    Raises:
        InvalidArgumentError: If src is None, length is negative or pad
            is not a byte value
    """
    if src is None or length is None or length < 0:
        raise InvalidArgumentError("Source cannot be None and length must be non-negative")
    if not 0 <= pad <= 0xFF:
        raise InvalidArgumentError(f"Pad value must be in range 0-255, got {pad}")
    if len(src) >= length:
        return bytes(src[:length])
    return bytes(src) + bytes([pad]) * (length - len(src))


def from_big_endian(data: bytes) -> int:
    """Decode an unsigned big-endian integer."""
    if data is None:
        raise InvalidArgumentError("Data cannot be None")
    return int.from_bytes(data, byteorder='big')


def constant_time_equals(a: Optional[bytes], b: Optional[bytes]) -> bool:
    """
    Compare two byte strings in constant time.

    Two None values compare equal; None never equals a byte string.
    """
    if a is None or b is None:
        return a is b
    return hmac.compare_digest(bytes(a), bytes(b))


def random_bytes(length: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Raises:
        InvalidArgumentError: If length is not positive
    """
    if length is None or length <= 0:
        raise InvalidArgumentError("Length must be greater than zero")
    return secrets.token_bytes(length)
