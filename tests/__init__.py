# Sigil Test Suite
"""
Test suite including:
- Unit tests (ByteSequence, byte helpers, encodings)
- CAVS-format and RFC 4231 vector tests
- Reference comparison against hashlib / cryptography
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
