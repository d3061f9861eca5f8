"""
Ed25519 (RFC 8032): public key from seed, sign, verify.
Points are kept in extended homogeneous coordinates (X, Y, Z, T).
"""

from __future__ import annotations

import hashlib

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)

_Point = tuple[int, int, int, int]

_IDENTITY: _Point = (0, 1, 1, 0)

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64


def _inv(x: int) -> int:
    return pow(x, _P - 2, _P)


def _hash_scalar(*parts: bytes) -> int:
    """SHA-512 of the concatenated parts, little-endian, mod L."""
    return int.from_bytes(hashlib.sha512(b"".join(parts)).digest(), "little") % _L


def _recover_x(y: int, sign: int) -> int | None:
    if y >= _P:
        return None
    x2 = (y * y - 1) * _inv(_D * y * y + 1) % _P
    if x2 == 0:
        return None if sign else 0
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P:
        x = x * _SQRT_M1 % _P
    if (x * x - x2) % _P:
        return None
    if (x & 1) != sign:
        x = _P - x
    return x


def _add(a: _Point, b: _Point) -> _Point:
    """RFC 8032 5.1.4 point addition."""
    x1, y1, z1, t1 = a
    x2, y2, z2, t2 = b
    pa = (y1 - x1) * (y2 - x2) % _P
    pb = (y1 + x1) * (y2 + x2) % _P
    pc = 2 * t1 * t2 * _D % _P
    pd = 2 * z1 * z2 % _P
    e, f, g, h = pb - pa, pd - pc, pd + pc, pb + pa
    return (e * f % _P, g * h % _P, f * g % _P, e * h % _P)


def _mul(s: int, pt: _Point) -> _Point:
    acc = _IDENTITY
    while s > 0:
        if s & 1:
            acc = _add(acc, pt)
        pt = _add(pt, pt)
        s >>= 1
    return acc


def _same(a: _Point, b: _Point) -> bool:
    return (a[0] * b[2] - b[0] * a[2]) % _P == 0 and (a[1] * b[2] - b[1] * a[2]) % _P == 0


def _encode(pt: _Point) -> bytes:
    zi = _inv(pt[2])
    x, y = pt[0] * zi % _P, pt[1] * zi % _P
    return (y | ((x & 1) << 255)).to_bytes(32, "little")


def _decode(data: bytes) -> _Point | None:
    if len(data) != 32:
        return None
    y = int.from_bytes(data, "little")
    sign, y = y >> 255, y & ((1 << 255) - 1)
    x = _recover_x(y, sign)
    if x is None:
        return None
    return (x, y, 1, x * y % _P)


_Gy = 4 * _inv(5) % _P
_Gx = _recover_x(_Gy, 0)
assert _Gx is not None
_BASE: _Point = (_Gx, _Gy, 1, _Gx * _Gy % _P)


def _expand(seed: bytes) -> tuple[int, bytes]:
    """RFC 8032 5.1.5: clamped scalar and nonce prefix from a 32-byte seed."""
    if len(seed) != SEED_SIZE:
        raise ValueError("Ed25519 seed must be 32 bytes")
    h = hashlib.sha512(seed).digest()
    a = int.from_bytes(h[:32], "little")
    a &= (1 << 254) - 8
    a |= 1 << 254
    return (a, h[32:])


def ed25519_public_key(seed: bytes) -> bytes:
    """
    Ed25519 public key (32 bytes) from a 32-byte seed.
    """
    a, _ = _expand(seed)
    return _encode(_mul(a, _BASE))


def ed25519_sign(message: bytes, seed: bytes) -> bytes:
    """
    Ed25519 signature (64 bytes, R || S) of message under a 32-byte seed.
    RFC 8032 5.1.6; the message is hashed internally, never by the caller.
    """
    a, prefix = _expand(seed)
    public = _encode(_mul(a, _BASE))
    r = _hash_scalar(prefix, message)
    r_enc = _encode(_mul(r, _BASE))
    k = _hash_scalar(r_enc, public, message)
    return r_enc + ((r + k * a) % _L).to_bytes(32, "little")


def ed25519_verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Verify an Ed25519 signature (RFC 8032 5.1.7).

    Args:
        message: Original message bytes.
        signature: 64-byte signature (R || S).
        public_key: 32-byte encoded public key.

    Returns:
        True iff signature is valid; malformed inputs give False.
    """
    if len(signature) != SIGNATURE_SIZE or len(public_key) != PUBLIC_KEY_SIZE:
        return False
    a_pt = _decode(public_key)
    r_pt = _decode(signature[:32])
    if a_pt is None or r_pt is None:
        return False
    s = int.from_bytes(signature[32:], "little")
    if s >= _L:
        return False
    k = _hash_scalar(signature[:32], public_key, message)
    return _same(_mul(s, _BASE), _add(r_pt, _mul(k, a_pt)))


__all__: tuple[str, ...] = (
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
)
