"""
SALTED HASHING
==============
SHA-512 helper used for stored passwords and other secrets.

FLOW:
- encode_sha512() prefixes the configured salt to the value and hashes it.

HOW:
- UTF-8 encodes salt + value and renders the digest as lowercase hex.
"""

from __future__ import annotations

import hashlib


def encode_sha512(salt: str, value: str) -> str:
    message = (salt + value).encode("utf-8")
    return hashlib.sha512(message).hexdigest()
