"""
Error types raised by the sigil core.

All failures are raised synchronously to the caller. Nothing is retried,
logged or swallowed inside the library.
"""


class SigilError(Exception):
    """Base class for every error raised by sigil."""
    pass


class InvalidArgumentError(SigilError, ValueError):
    """Raised when a required argument is absent or outside its valid range."""
    pass


class LengthMismatchError(SigilError, ValueError):
    """Raised when an operation needs equal-length inputs and gets different lengths."""
    pass


class OffsetOutOfRangeError(SigilError, IndexError):
    """Raised when a byte is read beyond the written length of a sequence."""
    pass
