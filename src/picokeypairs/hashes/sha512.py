"""
SHA-512Half: the first 256 bits of SHA-512, the ledger's general-purpose digest.
"""

from __future__ import annotations

import hashlib


def sha512_half(data: bytes) -> bytes:
    """
    First 32 bytes of SHA-512(data).

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return hashlib.sha512(data).digest()[:32]


def sha512_half_u32(data: bytes, *words: int) -> bytes:
    """sha512_half of data followed by each word as a 4-byte big-endian integer."""
    return sha512_half(bytes(data) + b"".join(w.to_bytes(4, "big") for w in words))


__all__: tuple[str, ...] = ("sha512_half", "sha512_half_u32")
