"""Message digests by JOSE hash name."""

from __future__ import annotations

import hashlib


def hashlib_name(hash_name: str) -> str:
    """Map ``SHA-256`` style names onto hashlib's ``sha256`` names."""
    return hash_name.lower().replace("-", "")


async def digest(hash_name: str, data: bytes) -> bytes:
    """Return the raw digest of ``data`` using ``hash_name``."""
    return hashlib.new(hashlib_name(hash_name), data).digest()
