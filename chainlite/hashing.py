"""SHA-256 helpers producing lowercase hexadecimal digests."""

import hashlib


def sha256_hex(text: str) -> str:
    """Return the 64-character lowercase hex SHA-256 digest of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()