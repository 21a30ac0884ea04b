"""
Unit tests for ByteSequence.

Tests:
- Single byte, byte run and integer appends
- Byte order handling
- Capacity growth
- repeat / xor construction helpers
- Readback and snapshots
"""

from array import array

import pytest

from sigil.core.byte_sequence import ByteOrder, ByteSequence, DEFAULT_CAPACITY
from sigil.core.errors import (
    InvalidArgumentError, LengthMismatchError, OffsetOutOfRangeError
)


class TestConstruction:
    """Tests for creating sequences."""

    def test_new_sequence_is_empty(self):
        """A new sequence has zero length."""
        seq = ByteSequence(16)
        assert len(seq) == 0
        assert seq.length() == 0
        assert seq.snapshot() == b""

    def test_initial_capacity_is_allocated(self):
        """Capacity hint is allocated up front."""
        assert ByteSequence(16).capacity == 16

    def test_negative_capacity_rejected(self):
        """Negative capacity should raise error."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence(-1)

    def test_zero_capacity_defaults_on_first_append(self):
        """Zero capacity grows to the default size on first write."""
        seq = ByteSequence()
        assert seq.capacity == 0
        seq.append(0x01)
        assert seq.capacity == DEFAULT_CAPACITY

    def test_zero_capacity_large_first_append(self):
        """A first write bigger than the default uses the next power of two."""
        seq = ByteSequence(0)
        seq.extend(bytes(300))
        assert seq.capacity == 512
        assert len(seq) == 300

    def test_from_bytes(self):
        """from_bytes copies the input."""
        data = bytearray(b"\x01\x02\x03")
        seq = ByteSequence.from_bytes(data)
        data[0] = 0xFF
        assert seq.snapshot() == b"\x01\x02\x03"


class TestAppend:
    """Tests for append operations."""

    def test_append_single_byte(self):
        """Single byte append."""
        seq = ByteSequence(4)
        seq.append(0x42)
        assert seq.snapshot() == b"\x42"

    def test_append_byte_boundaries(self):
        """0x00 and 0xFF are valid byte values."""
        seq = ByteSequence(2)
        seq.append(0x00)
        seq.append(0xFF)
        assert seq.snapshot() == b"\x00\xff"

    def test_append_out_of_range_byte_rejected(self):
        """Values outside 0-255 should raise error."""
        seq = ByteSequence(4)
        with pytest.raises(InvalidArgumentError):
            seq.append(256)
        with pytest.raises(InvalidArgumentError):
            seq.append(-1)

    def test_append_none_rejected(self):
        """None byte should raise error."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence(4).append(None)

    def test_extend_bytes(self):
        """Byte runs are appended in order."""
        seq = ByteSequence(2)
        seq.extend(b"ab")
        seq.extend(bytearray(b"cd"))
        seq.extend(memoryview(b"ef"))
        assert seq.snapshot() == b"abcdef"

    def test_extend_empty(self):
        """Empty run leaves the sequence unchanged."""
        seq = ByteSequence(2)
        seq.extend(b"")
        assert len(seq) == 0

    def test_extend_with_sequence(self):
        """Another ByteSequence can be appended."""
        seq = ByteSequence.from_bytes(b"ab")
        seq.extend(ByteSequence.from_bytes(b"cd"))
        assert seq.snapshot() == b"abcd"

    def test_extend_wide_memoryview(self):
        """A memoryview over multi-byte items is appended byte for byte."""
        view = memoryview(array('I', [0x01020304, 0x05060708]))
        seq = ByteSequence(0)
        seq.extend(view)
        assert len(seq) == view.nbytes
        assert seq.capacity & (seq.capacity - 1) == 0
        assert seq.snapshot() == view.tobytes()

    def test_from_bytes_wide_memoryview(self):
        """from_bytes sizes the sequence by bytes, not items."""
        view = memoryview(array('H', [0xABCD, 0x1234, 0xFFFF]))
        seq = ByteSequence.from_bytes(view)
        assert len(seq) == 6
        assert seq.snapshot() == view.tobytes()

    def test_extend_none_rejected(self):
        """None run should raise error."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence(4).extend(None)

    def test_extend_str_rejected(self):
        """Text must be encoded before appending."""
        with pytest.raises(TypeError):
            ByteSequence(4).extend("text")


class TestIntegerAppend:
    """Tests for fixed-width integer appends."""

    def test_int_big_endian(self):
        """4-byte big-endian: most significant byte first."""
        seq = ByteSequence(4)
        seq.append_int(0x01020304, 4, ByteOrder.BIG_ENDIAN)
        assert seq.snapshot() == b"\x01\x02\x03\x04"

    def test_int_little_endian(self):
        """4-byte little-endian: least significant byte first."""
        seq = ByteSequence(4)
        seq.append_int(0x01020304, 4, ByteOrder.LITTLE_ENDIAN)
        assert seq.snapshot() == b"\x04\x03\x02\x01"

    def test_long_big_endian(self):
        """8-byte big-endian."""
        seq = ByteSequence(8)
        seq.append_int(0x0102030405060708, 8, ByteOrder.BIG_ENDIAN)
        assert seq.snapshot() == bytes(range(1, 9))

    def test_long_little_endian(self):
        """8-byte little-endian."""
        seq = ByteSequence(8)
        seq.append_int(0x0102030405060708, 8, ByteOrder.LITTLE_ENDIAN)
        assert seq.snapshot() == bytes(range(8, 0, -1))

    def test_default_is_four_byte_big_endian(self):
        """Defaults: width 4, big-endian."""
        seq = ByteSequence()
        seq.append_int(0xCAFEBABE)
        assert seq.snapshot() == b"\xca\xfe\xba\xbe"

    def test_negative_value_wraps(self):
        """Negative values are written in two's complement."""
        seq = ByteSequence()
        seq.append_int(-1, 4)
        seq.append_int(-2, 8, ByteOrder.LITTLE_ENDIAN)
        assert seq.snapshot() == b"\xff" * 4 + b"\xfe" + b"\xff" * 7

    def test_oversized_value_truncated_to_width(self):
        """Only the low width bytes are written."""
        seq = ByteSequence()
        seq.append_int(0x1_0000_0001, 4)
        assert seq.snapshot() == b"\x00\x00\x00\x01"

    def test_unsupported_width_rejected(self):
        """Widths other than 4 and 8 should raise error."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence().append_int(1, 2)

    def test_invalid_order_rejected(self):
        """Order must be a ByteOrder member."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence().append_int(1, 4, "big")

    def test_mixed_appends(self):
        """Appends of different kinds interleave correctly."""
        seq = ByteSequence(16)
        seq.append(0x42)
        seq.append_int(123456789, 8, ByteOrder.LITTLE_ENDIAN)
        seq.extend(b"\x00")
        assert str(seq) == "0x4215CD5B070000000000"


class TestGrowth:
    """Tests for capacity growth."""

    def test_growth_to_next_power_of_two(self):
        """Capacity jumps to the next power of two at or above the need."""
        seq = ByteSequence(3)
        seq.extend(b"\x00" * 5)
        assert seq.capacity == 8

    def test_exact_power_of_two_requirement(self):
        """A requirement that is a power of two is used directly."""
        seq = ByteSequence(1)
        seq.extend(bytes(16))
        assert seq.capacity == 16

    def test_no_growth_when_full_fits(self):
        """Filling to exactly capacity does not grow."""
        seq = ByteSequence(8)
        seq.append_int(0, 8)
        assert seq.capacity == 8

    def test_length_never_exceeds_capacity(self):
        """Logical length stays within capacity across many appends."""
        seq = ByteSequence(1)
        for i in range(1000):
            seq.append(i % 256)
            assert len(seq) <= seq.capacity
        assert len(seq) == 1000

    def test_content_preserved_across_growth(self):
        """Growth keeps previously written bytes."""
        seq = ByteSequence(2)
        expected = bytes(range(200))
        for b in expected:
            seq.append(b)
        assert seq.snapshot() == expected


class TestReadback:
    """Tests for byte_at and snapshot."""

    def test_byte_at_unsigned(self):
        """byte_at returns values in 0-255."""
        seq = ByteSequence.from_bytes(b"\x00\x7f\x80\xff")
        assert [seq.byte_at(i) for i in range(4)] == [0, 127, 128, 255]

    def test_byte_at_past_length_rejected(self):
        """Reading at length is out of range even when capacity is larger."""
        seq = ByteSequence(16)
        seq.append(1)
        with pytest.raises(OffsetOutOfRangeError):
            seq.byte_at(1)

    def test_byte_at_negative_rejected(self):
        """Negative offsets are out of range."""
        seq = ByteSequence.from_bytes(b"abc")
        with pytest.raises(IndexError):
            seq.byte_at(-1)

    def test_snapshot_is_independent(self):
        """Appending after snapshot does not change the snapshot."""
        seq = ByteSequence.from_bytes(b"ab")
        snap = seq.snapshot()
        seq.append(0x63)
        assert snap == b"ab"
        assert seq.snapshot() == b"abc"

    def test_iteration(self):
        """Iteration yields the written bytes."""
        assert list(ByteSequence.from_bytes(b"\x01\x02")) == [1, 2]

    def test_equality(self):
        """Sequences compare by written content, not capacity."""
        a = ByteSequence(4)
        a.extend(b"xy")
        b = ByteSequence(64)
        b.extend(b"xy")
        assert a == b
        assert a != ByteSequence.from_bytes(b"xz")


class TestRepeat:
    """Tests for ByteSequence.repeat."""

    def test_repeat(self):
        """repeat builds count copies of value."""
        seq = ByteSequence.repeat(0xFF, 4)
        assert seq.snapshot() == b"\xff" * 4
        assert len(seq) == 4

    def test_repeat_zero_count(self):
        """Zero count gives an empty sequence."""
        assert len(ByteSequence.repeat(0x36, 0)) == 0

    def test_repeat_negative_count_rejected(self):
        """Negative count should raise error."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence.repeat(0x36, -1)

    def test_repeat_can_be_extended(self):
        """A repeated sequence is appendable."""
        seq = ByteSequence.repeat(0x00, 2)
        seq.append(0x01)
        assert seq.snapshot() == b"\x00\x00\x01"


class TestXor:
    """Tests for ByteSequence.xor."""

    def test_xor(self):
        """Byte-wise XOR."""
        a = ByteSequence.from_bytes(b"\x0f\xf0\xaa")
        b = ByteSequence.from_bytes(b"\xff\xff\x55")
        assert ByteSequence.xor(a, b).snapshot() == b"\xf0\x0f\xff"

    def test_xor_self_inverse(self):
        """xor(A, xor(A, B)) == B."""
        samples = [
            (b"", b""),
            (b"\x00", b"\xff"),
            (b"key material", b"hello world!"),
            (bytes(range(64)), bytes(range(64, 128))),
        ]
        for raw_a, raw_b in samples:
            a = ByteSequence.from_bytes(raw_a)
            b = ByteSequence.from_bytes(raw_b)
            assert ByteSequence.xor(a, ByteSequence.xor(a, b)) == b

    def test_xor_length_mismatch(self):
        """Different lengths should raise error."""
        a = ByteSequence.from_bytes(b"ab")
        b = ByteSequence.from_bytes(b"abc")
        with pytest.raises(LengthMismatchError):
            ByteSequence.xor(a, b)

    def test_xor_none_rejected(self):
        """None operand should raise error."""
        with pytest.raises(InvalidArgumentError):
            ByteSequence.xor(None, ByteSequence.from_bytes(b"a"))

    def test_xor_does_not_modify_inputs(self):
        """Inputs are left untouched."""
        a = ByteSequence.from_bytes(b"\x01")
        b = ByteSequence.from_bytes(b"\x02")
        ByteSequence.xor(a, b)
        assert a.snapshot() == b"\x01"
        assert b.snapshot() == b"\x02"
