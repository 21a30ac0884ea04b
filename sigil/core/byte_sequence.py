"""
Growable Byte Sequence

An append-only byte buffer used to assemble padded SHA-256 messages,
HMAC key blocks and serialized digests.

Features:
- Single byte, byte run and fixed-width integer appends
- Explicit big-endian / little-endian integer encoding
- Unsigned byte readback and snapshot copies
- Next-power-of-two capacity growth

Example:
    >>> seq = ByteSequence(16)
    >>> seq.append(0x42)
    >>> seq.append_int(1, 4, ByteOrder.LITTLE_ENDIAN)
    >>> seq.snapshot().hex()
    '4201000000'
"""

from enum import Enum
from typing import Iterator, Union

from .errors import InvalidArgumentError, LengthMismatchError, OffsetOutOfRangeError


# Buffer configuration
DEFAULT_CAPACITY = 128      # one 64-byte block + 0x80 marker + 8-byte length, rounded up
INT_WIDTHS = (4, 8)         # supported integer widths in bytes


BytesLike = Union[bytes, bytearray, memoryview]


class ByteOrder(Enum):
    """Byte order for multi-byte integer appends."""
    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"


def _next_power_of_two(n: int) -> int:
    """Smallest power of two that is >= n (n >= 1)."""
    return 1 << (n - 1).bit_length()


class ByteSequence:
    """
    Append-only sequence of 8-bit values.

    The logical length never exceeds the allocated capacity. Bytes past the
    logical length are unused and never exposed.
    """

    def __init__(self, capacity: int = 0):
        """
        Create an empty sequence.

        Args:
            capacity: Initial capacity hint in bytes. Zero defers allocation
                until the first append.

        Raises:
            InvalidArgumentError: If capacity is negative
        """
        if capacity is None or capacity < 0:
            raise InvalidArgumentError("Capacity cannot be negative")

        self._buffer = bytearray(capacity)
        self._length = 0

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'ByteSequence':
        """Create a sequence holding a copy of ``data``."""
        raw = _as_bytes(data)
        seq = cls(len(raw))
        seq.extend(raw)
        return seq

    @classmethod
    def repeat(cls, value: int, count: int) -> 'ByteSequence':
        """
        Create a sequence of ``count`` copies of ``value``.

        Args:
            value: Byte value (0-255)
            count: Number of repetitions

        Returns:
            New ByteSequence of length ``count``

        Raises:
            InvalidArgumentError: If count is negative or value is not a byte
        """
        if count is None or count < 0:
            raise InvalidArgumentError("Count cannot be negative")
        _check_byte(value)

        seq = cls(count)
        seq._buffer[:count] = bytes([value]) * count
        seq._length = count
        return seq

    @classmethod
    def xor(cls, a: 'ByteSequence', b: 'ByteSequence') -> 'ByteSequence':
        """
        Byte-wise XOR of two equal-length sequences.

        Raises:
            InvalidArgumentError: If either sequence is None
            LengthMismatchError: If the sequences differ in length
        """
        if a is None or b is None:
            raise InvalidArgumentError("Sequences cannot be None")
        if len(a) != len(b):
            raise LengthMismatchError(
                f"Sequences must have the same length for XOR ({len(a)} != {len(b)})"
            )

        result = cls(len(a))
        for i in range(len(a)):
            result.append(a.byte_at(i) ^ b.byte_at(i))
        return result

    # ------------------------------------------------------------------
    # Appends
    # ------------------------------------------------------------------

    def append(self, value: int) -> None:
        """
        Append a single byte.

        Raises:
            InvalidArgumentError: If value is None or outside 0-255
        """
        _check_byte(value)
        self._ensure_capacity(self._length + 1)
        self._buffer[self._length] = value
        self._length += 1

    def extend(self, data: Union[BytesLike, 'ByteSequence']) -> None:
        """
        Append a run of bytes.

        Args:
            data: bytes, bytearray, memoryview or another ByteSequence

        Raises:
            InvalidArgumentError: If data is None
            TypeError: If data is not bytes-like
        """
        raw = _as_bytes(data)
        new_length = self._length + len(raw)
        self._ensure_capacity(new_length)
        self._buffer[self._length:new_length] = raw
        self._length = new_length

    def append_int(self, value: int, width: int = 4,
                   order: ByteOrder = ByteOrder.BIG_ENDIAN) -> None:
        """
        Append a 4- or 8-byte integer in the given byte order.

        The value is reduced modulo 2^(8 * width), so negative values are
        written in two's complement form.

        Args:
            value: Integer to append
            width: Width in bytes (4 or 8)
            order: ByteOrder.BIG_ENDIAN or ByteOrder.LITTLE_ENDIAN

        Raises:
            InvalidArgumentError: If value is None, width is unsupported
                or order is not a ByteOrder
        """
        if value is None:
            raise InvalidArgumentError("Value cannot be None")
        if width not in INT_WIDTHS:
            raise InvalidArgumentError(f"Width must be one of {INT_WIDTHS}, got {width}")
        if not isinstance(order, ByteOrder):
            raise InvalidArgumentError("Order must be a ByteOrder")

        masked = value & ((1 << (8 * width)) - 1)
        self.extend(masked.to_bytes(width, byteorder=order.value))

    # ------------------------------------------------------------------
    # Readback
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Current logical length in bytes."""
        return self._length

    @property
    def capacity(self) -> int:
        """Currently allocated capacity in bytes."""
        return len(self._buffer)

    def byte_at(self, offset: int) -> int:
        """
        Read the unsigned byte at ``offset``.

        Raises:
            OffsetOutOfRangeError: If offset is outside [0, length)
        """
        if offset < 0 or offset >= self._length:
            raise OffsetOutOfRangeError(f"Offset out of bounds: {offset}")
        return self._buffer[offset]

    def snapshot(self) -> bytes:
        """Independent copy of exactly the written bytes."""
        return bytes(self._buffer[:self._length])

    def _ensure_capacity(self, required: int) -> None:
        if required <= len(self._buffer):
            return

        new_capacity = _next_power_of_two(required)
        if not self._buffer:
            new_capacity = max(new_capacity, DEFAULT_CAPACITY)
        self._buffer.extend(bytes(new_capacity - len(self._buffer)))

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return iter(self.snapshot())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteSequence):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "0x" + self.snapshot().hex().upper()

    def __repr__(self) -> str:
        return f"ByteSequence(length={self._length}, capacity={self.capacity}, data={self})"


def _check_byte(value: int) -> None:
    if value is None:
        raise InvalidArgumentError("Byte value cannot be None")
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected int byte value, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise InvalidArgumentError(f"Byte value must be in range 0-255, got {value}")


def _as_bytes(data) -> Union[bytes, bytearray]:
    """Flatten bytes-like input so that len() is its size in bytes."""
    if data is None:
        raise InvalidArgumentError("Bytes cannot be None")
    if isinstance(data, ByteSequence):
        return data.snapshot()
    if isinstance(data, memoryview):
        # multi-byte formats report len() in items, not bytes
        return data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")
    return data
