# Core Module
"""
Byte-level building blocks:
- ByteSequence growable buffer with explicit byte order - byte_sequence.py
- Stateless byte helpers (padding, word decoding, tag comparison) - bytes_util.py
- Hex and Base64URL text encodings - encoding.py
- Error types - errors.py
"""

from .errors import (
    SigilError,
    InvalidArgumentError,
    LengthMismatchError,
    OffsetOutOfRangeError,
)

from .byte_sequence import (
    ByteOrder,
    ByteSequence,
)

__all__ = [
    'SigilError',
    'InvalidArgumentError',
    'LengthMismatchError',
    'OffsetOutOfRangeError',
    'ByteOrder',
    'ByteSequence',
]
