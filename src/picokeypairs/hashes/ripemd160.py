"""
RIPEMD-160 (160-bit output). Pure Python, since hashlib only exposes it when
the linked OpenSSL still ships the legacy provider.
"""

from __future__ import annotations

import hashlib

_MASK32 = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# Round constants, left and right lines.
_KL = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_KR = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)

# Message word selection, left and right lines.
_ML = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)  # fmt: skip
_MR = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)  # fmt: skip

# Left-rotation amounts, left and right lines.
_RL = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)  # fmt: skip
_RR = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)  # fmt: skip


def _rol32(v: int, n: int) -> int:
    """Rotate 32-bit value v left by n bits."""
    v &= _MASK32
    return ((v << n) | (v >> (32 - n))) & _MASK32


def _f(rnd: int, x: int, y: int, z: int) -> int:
    """Boolean function for round group rnd (0..4)."""
    if rnd == 0:
        return x ^ y ^ z
    if rnd == 1:
        return (x & y) | (~x & z)
    if rnd == 2:
        return (x | ~y) ^ z
    if rnd == 3:
        return (x & z) | (y & ~z)
    return x ^ (y | ~z)


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Process one 64-byte block; returns the new 5-word state."""
    h0, h1, h2, h3, h4 = state
    x = [int.from_bytes(block[4 * i : 4 * i + 4], "little") for i in range(16)]
    al, bl, cl, dl, el = state
    ar, br, cr, dr, er = state
    for j in range(80):
        rnd = j >> 4
        t = _rol32(al + _f(rnd, bl, cl, dl) + x[_ML[j]] + _KL[rnd], _RL[j])
        al, bl, cl, dl, el = el, (t + el) & _MASK32, bl, _rol32(cl, 10), dl
        t = _rol32(ar + _f(4 - rnd, br, cr, dr) + x[_MR[j]] + _KR[rnd], _RR[j])
        ar, br, cr, dr, er = er, (t + er) & _MASK32, br, _rol32(cr, 10), dr
    return (
        (h1 + cl + dr) & _MASK32,
        (h2 + dl + er) & _MASK32,
        (h3 + el + ar) & _MASK32,
        (h4 + al + br) & _MASK32,
        (h0 + bl + cr) & _MASK32,
    )


def ripemd160(data: bytes) -> bytes:
    """
    RIPEMD-160 hash.

    Args:
        data: Input bytes (any length).

    Returns:
        20-byte digest.
    """
    data = bytes(data)
    state: tuple[int, ...] = _INITIAL_STATE
    full = len(data) & ~63
    for off in range(0, full, 64):
        state = _compress(state, data[off : off + 64])
    pad = b"\x80" + b"\x00" * ((119 - len(data)) & 63)
    tail = data[full:] + pad + (8 * len(data)).to_bytes(8, "little")
    for off in range(0, len(tail), 64):
        state = _compress(state, tail[off : off + 64])
    return b"".join(h.to_bytes(4, "little") for h in state)


def hash160(data: bytes) -> bytes:
    """RIPEMD-160 of SHA-256 of data (20 bytes); the account id hash."""
    return ripemd160(hashlib.sha256(data).digest())


__all__: tuple[str, ...] = ("hash160", "ripemd160")
