"""
HMAC-SHA256 (RFC 2104 / RFC 4231)

Keyed message authentication built on the from-scratch SHA-256 engine.

Construction:
    K'     = key normalized to the 64-byte block size
    inner  = SHA-256((K' XOR ipad) || message)
    output = SHA-256((K' XOR opad) || inner)

Security considerations:
- Tags are verified with constant-time comparison
- The normalized key is derived per call and never retained
- Key material is never logged
"""

import logging
from typing import Union

from ..core.byte_sequence import ByteSequence
from ..core.bytes_util import constant_time_equals, random_bytes, right_pad
from ..core.errors import InvalidArgumentError
from ..core_crypto.sha256 import BLOCK_SIZE, DIGEST_SIZE, SHA256Engine

logger = logging.getLogger(__name__)


# HMAC configuration
IPAD = 0x36
OPAD = 0x5C
HMAC_KEY_BYTES = BLOCK_SIZE   # default generated key length (512 bits)
ALG_NAME = "HS256"


BytesLike = Union[bytes, bytearray, memoryview]

_engine = SHA256Engine()


def _require_bytes(value: BytesLike, name: str) -> bytes:
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None")
    if isinstance(value, ByteSequence):
        return value.snapshot()
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes for {name.lower()}, got {type(value).__name__}")
    return bytes(value)


def normalize_key(key: BytesLike) -> ByteSequence:
    """
    Normalize an HMAC key to exactly the block size.

    Keys longer than 64 bytes are replaced by their SHA-256 digest; the
    result is then zero-padded on the right to 64 bytes. A 64-byte key is
    used as-is.

    Args:
        key: Raw secret key (any length, including empty)

    Returns:
        64-byte ByteSequence

    Raises:
        InvalidArgumentError: If key is None
    """
    raw = _require_bytes(key, "Key")

    if len(raw) > BLOCK_SIZE:
        logger.debug("HMAC key longer than block size (%d > %d), hashing down", len(raw), BLOCK_SIZE)
        raw = _engine.compute_digest(raw)

    return ByteSequence.from_bytes(right_pad(raw, BLOCK_SIZE))


def hmac_sha256(message: BytesLike, key: BytesLike) -> bytes:
    """
    Compute HMAC-SHA256 of a message.

    Args:
        message: Data to authenticate
        key: Secret key

    Returns:
        32-byte MAC

    Raises:
        InvalidArgumentError: If message or key is None

    Example:
        >>> hmac_sha256(b"Hi There", b"\\x0b" * 20).hex()[:16]
        'b0344c61d8db3853'
    """
    data = _require_bytes(message, "Message")
    normalized = normalize_key(key)

    inner = ByteSequence.xor(normalized, ByteSequence.repeat(IPAD, BLOCK_SIZE))
    inner.extend(data)
    inner_digest = _engine.compute_digest(inner)

    outer = ByteSequence.xor(normalized, ByteSequence.repeat(OPAD, BLOCK_SIZE))
    outer.extend(inner_digest)
    return _engine.compute_digest(outer)


def hmac_sha256_hex(message: BytesLike, key: BytesLike) -> str:
    """HMAC-SHA256 as a 64-character lowercase hex string."""
    return hmac_sha256(message, key).hex()


def verify_hmac_sha256(message: BytesLike, key: BytesLike, tag: BytesLike) -> bool:
    """
    Verify an HMAC-SHA256 tag using constant-time comparison.

    Args:
        message: Original data
        key: Secret key
        tag: MAC to check

    Returns:
        True if the tag is valid, False otherwise

    Raises:
        InvalidArgumentError: If message, key or tag is None
    """
    candidate = _require_bytes(tag, "Tag")
    expected = hmac_sha256(message, key)
    return constant_time_equals(expected, candidate)


def generate_key(length: int = HMAC_KEY_BYTES) -> bytes:
    """Generate a random HMAC key from the platform CSPRNG."""
    return random_bytes(length)


class HS256Algorithm:
    """
    HMAC using SHA-256, registered under the JWA name "HS256".

    Example:
        >>> alg = HS256Algorithm()
        >>> tag = alg.sign(b"payload", b"secret")
        >>> alg.verify(b"payload", b"secret", tag)
        True
    """

    digest_size = DIGEST_SIZE

    def algorithm_name(self) -> str:
        return ALG_NAME

    def sign(self, data: BytesLike, key: BytesLike) -> bytes:
        """32-byte HMAC-SHA256 signature of ``data`` under ``key``."""
        return hmac_sha256(data, key)

    def verify(self, data: BytesLike, key: BytesLike, signature: BytesLike) -> bool:
        """Constant-time check of ``signature`` against a fresh signature."""
        return verify_hmac_sha256(data, key, signature)

    def __repr__(self) -> str:
        return f"HS256Algorithm(name={ALG_NAME!r})"


# Self-test when run directly
if __name__ == "__main__":
    # RFC 4231 test cases
    test_cases = [
        ("Case 1", b"\x0b" * 20, b"Hi There",
         "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7"),
        ("Case 2", b"Jefe", b"what do ya want for nothing?",
         "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"),
        ("Case 6", b"\xaa" * 131, b"Test Using Larger Than Block-Size Key - Hash Key First",
         "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54"),
    ]

    print("HMAC-SHA256 Implementation Test")
    print("=" * 60)

    all_passed = True
    for label, key, message, expected in test_cases:
        result = hmac_sha256_hex(message, key)
        passed = result == expected
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\n[{label}] key={len(key)} bytes, message={message[:40]!r}")
        print(f"Expected: {expected}")
        print(f"Got:      {result}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
