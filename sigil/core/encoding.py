"""
Text encodings for binary values: hexadecimal and Base64URL (RFC 4648 §5).

Presentation only. Both directions are strict: malformed input raises
InvalidArgumentError instead of being silently repaired.
"""

import base64
import binascii
import re

from .errors import InvalidArgumentError


_HEX_PATTERN = re.compile(r'\A[0-9a-fA-F]*\Z')
_BASE64URL_PATTERN = re.compile(r'\A[A-Za-z0-9_-]*\Z')


def to_hex(data: bytes) -> str:
    """Uppercase hex, two digits per byte (b'\\x0a\\x1f' -> '0A1F')."""
    if data is None:
        raise InvalidArgumentError("Source bytes cannot be None")
    return bytes(data).hex().upper()


def to_hex_string(data: bytes) -> str:
    """Uppercase hex with a ``0x`` prefix."""
    return "0x" + to_hex(data)


def from_hex(text: str) -> bytes:
    """
    Decode a hex string (either case, no separators).

    Raises:
        InvalidArgumentError: If text is None, has odd length or contains
            non-hex characters
    """
    if text is None or len(text) % 2 != 0:
        raise InvalidArgumentError("Hex string must not be None and must have an even length")
    if not _HEX_PATTERN.match(text):
        raise InvalidArgumentError(f"Invalid hex character in string: {text}")
    return bytes.fromhex(text)


def base64url_encode(data: bytes) -> str:
    """Base64URL without ``=`` padding, as used by JOSE."""
    if data is None:
        raise InvalidArgumentError("Source bytes cannot be None")
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b'=').decode('ascii')


def base64url_decode(text: str) -> bytes:
    """
    Decode unpadded (or padded) Base64URL text.

    Raises:
        InvalidArgumentError: If text is None, uses characters outside the
            URL-safe alphabet or has an impossible length
    """
    if text is None:
        raise InvalidArgumentError("Base64URL text cannot be None")

    stripped = text.rstrip('=')
    if not _BASE64URL_PATTERN.match(stripped):
        raise InvalidArgumentError(f"Invalid Base64URL character in string: {text}")
    if len(stripped) % 4 == 1:
        raise InvalidArgumentError(f"Invalid Base64URL length: {len(stripped)}")

    padded = stripped + '=' * (-len(stripped) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as e:
        raise InvalidArgumentError(f"Invalid Base64URL input: {e}") from e
