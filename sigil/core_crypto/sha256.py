"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4,
without hashlib.

Components:
- Padding: 0x80 marker, zero fill to 56 mod 64, 64-bit big-endian bit length
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds over eight working variables
- Output: 256-bit (32-byte) digest, state words serialized big-endian

Every digest is computed from a fresh copy of the initial hash values, so
no state survives between calls and concurrent callers never interfere.
"""

import logging
from typing import List, Sequence, Tuple, Union

from ..core.byte_sequence import ByteOrder, ByteSequence
from ..core.bytes_util import from_big_endian
from ..core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


# Algorithm configuration
BLOCK_SIZE = 64          # bytes per compression block (512 bits)
DIGEST_SIZE = 32         # bytes of output (256 bits)
LENGTH_FIELD_SIZE = 8    # trailing 64-bit message length
ROUNDS = 64

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF

# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5, 0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3, 0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc, 0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7, 0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13, 0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3, 0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5, 0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208, 0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


Message = Union[bytes, bytearray, memoryview, ByteSequence]


def _rotr(value: int, amount: int) -> int:
    """Circular right rotation of a 32-bit word."""
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def _small_sigma0(x: int) -> int:
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _small_sigma1(x: int) -> int:
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _big_sigma0(x: int) -> int:
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _big_sigma1(x: int) -> int:
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def _choice(x: int, y: int, z: int) -> int:
    """Bitwise: if x then y else z."""
    return (x & y) ^ (~x & MASK_32 & z)


def _majority(x: int, y: int, z: int) -> int:
    """Bitwise majority vote of x, y, z."""
    return (x & y) ^ (x & z) ^ (y & z)


def _coerce_message(data: Message) -> bytes:
    if data is None:
        raise InvalidArgumentError("Input message cannot be None")
    if isinstance(data, ByteSequence):
        return data.snapshot()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    return bytes(data)


def pad_message(data: Message) -> ByteSequence:
    """
    Pad a message to a whole number of 64-byte blocks.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append the fewest zero bytes so that length ≡ 56 (mod 64),
       i.e. the bit length ≡ 448 (mod 512)
    3. Append original message length in bits as 64-bit big-endian integer

    A 55-byte message pads to 64 bytes; a 56-byte message pads to 128.

    Args:
        data: The original message bytes

    Returns:
        ByteSequence whose length is a multiple of 64

    Raises:
        InvalidArgumentError: If data is None
        RuntimeError: If the padded length is not a multiple of the block size
    """
    message = _coerce_message(data)
    length = len(message)

    zero_count = (BLOCK_SIZE - (length + 1 + LENGTH_FIELD_SIZE) % BLOCK_SIZE) % BLOCK_SIZE
    padded_length = length + 1 + zero_count + LENGTH_FIELD_SIZE

    buffer = ByteSequence(padded_length)
    buffer.extend(message)
    buffer.append(0x80)
    buffer.extend(bytes(zero_count))
    buffer.append_int((length * 8) & MASK_64, LENGTH_FIELD_SIZE, ByteOrder.BIG_ENDIAN)

    if len(buffer) % BLOCK_SIZE != 0:
        raise RuntimeError(
            f"Padded length {len(buffer)} is not a multiple of the block size {BLOCK_SIZE}"
        )

    logger.debug("Padded %d-byte message to %d bytes (%d blocks)",
                 length, padded_length, padded_length // BLOCK_SIZE)
    return buffer


def _message_schedule(block: bytes) -> List[int]:
    """
    Load 16 big-endian words from a block and extend them to 64.

    For t from 16 to 63:
        W[t] = σ1(W[t-2]) + W[t-7] + σ0(W[t-15]) + W[t-16]  (mod 2^32)
    """
    w = [from_big_endian(block[i:i + 4]) for i in range(0, BLOCK_SIZE, 4)]
    for t in range(16, ROUNDS):
        w.append((_small_sigma1(w[t - 2]) + w[t - 7] + _small_sigma0(w[t - 15]) + w[t - 16]) & MASK_32)
    return w


def _compress(state: Sequence[int], block: bytes) -> Tuple[int, ...]:
    """
    Run the 64-round compression function over one block.

    Args:
        state: Current hash state (8 32-bit words)
        block: 64-byte block

    Returns:
        New hash state; the input state is not modified
    """
    w = _message_schedule(block)
    a, b, c, d, e, f, g, h = state

    for t in range(ROUNDS):
        t1 = (h + _big_sigma1(e) + _choice(e, f, g) + K[t] + w[t]) & MASK_32
        t2 = (_big_sigma0(a) + _majority(a, b, c)) & MASK_32
        h, g, f, e = g, f, e, (d + t1) & MASK_32
        d, c, b, a = c, b, a, (t1 + t2) & MASK_32

    return tuple(
        (s + v) & MASK_32 for s, v in zip(state, (a, b, c, d, e, f, g, h))
    )


def sha256(data: Message) -> bytes:
    """
    Compute the SHA-256 digest of the input data.

    Args:
        data: Input bytes to hash (bytes, bytearray, memoryview or ByteSequence)

    Returns:
        256-bit (32-byte) digest as bytes

    Raises:
        InvalidArgumentError: If data is None
        TypeError: If data is not bytes-like

    Example:
        >>> sha256(b"abc").hex()
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    padded = pad_message(data).snapshot()
    state: Tuple[int, ...] = H_INITIAL
    for offset in range(0, len(padded), BLOCK_SIZE):
        state = _compress(state, padded[offset:offset + BLOCK_SIZE])

    digest = ByteSequence(DIGEST_SIZE)
    for word in state:
        digest.append_int(word, 4, ByteOrder.BIG_ENDIAN)
    return digest.snapshot()


def sha256_hex(data: Message) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Returns:
        64-character lowercase hexadecimal string
    """
    return sha256(data).hex()


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """Compute SHA-256 hash of a string after encoding it."""
    if text is None:
        raise InvalidArgumentError("Input text cannot be None")
    return sha256(text.encode(encoding))


class SHA256Engine:
    """
    SHA-256 digest engine.

    Holds no hash state between calls: each compute_digest call starts from
    the initial hash values, so one instance can be reused or shared freely.

    Example:
        >>> engine = SHA256Engine()
        >>> engine.compute_digest(b"") == engine.compute_digest(b"")
        True
    """

    name = "SHA-256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def compute_digest(self, data: Message) -> bytes:
        """32-byte digest of ``data``."""
        return sha256(data)

    def hexdigest(self, data: Message) -> str:
        return sha256_hex(data)

    def __repr__(self) -> str:
        return f"SHA256Engine(digest_size={self.digest_size}, block_size={self.block_size})"


# Self-test when run directly
if __name__ == "__main__":
    # Test vectors from FIPS 180-4 examples and NIST CAVS
    test_cases = [
        (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
         "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
        (b"a" * 55, "9f4390f8d30c2dd92ec9f095b65e2b9ae9b0a925a5258e241c9f1e910f734318"),
        (b"a" * 56, "b35439a4ac6f0948b6d6f9e3c6af0f5f590ce20f1bde7090ef7970686ec6738a"),
    ]

    print("SHA-256 Implementation Test")
    print("=" * 60)

    all_passed = True
    for data, expected in test_cases:
        result = sha256_hex(data)
        passed = result == expected
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\nInput:    {data[:50]!r}{'...' if len(data) > 50 else ''} ({len(data)} bytes)")
        print(f"Padded:   {len(pad_message(data))} bytes")
        print(f"Expected: {expected}")
        print(f"Got:      {result}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
