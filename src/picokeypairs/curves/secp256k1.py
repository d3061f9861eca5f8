"""
secp256k1: compressed point encoding, ECDSA with RFC 6979 nonces and low-S
signatures, public key tweaking for generator/account key families.
"""

from __future__ import annotations

import hashlib
import hmac

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# (0, 0) is not on the curve; it stands for the point at infinity.
_INFINITY = (0, 0)

CURVE_ORDER = _N


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    a %= n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Add two points in affine coords; returns (rx, ry)."""
    if (px, py) == _INFINITY:
        return (qx, qy)
    if (qx, qy) == _INFINITY:
        return (px, py)
    if px == qx:
        if py != qy or py == 0:
            return _INFINITY
        lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> tuple[int, int]:
    """Scalar multiplication d * (x, y) by double-and-add."""
    d = d % _N
    rx, ry = _INFINITY
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _on_curve(x: int, y: int) -> bool:
    return (y * y - (x * x * x + 7)) % _P == 0


def is_valid_scalar(d: int) -> bool:
    """True iff 0 < d < n, i.e. d is usable as a private key."""
    return 0 < d < _N


def encode_point(x: int, y: int) -> bytes:
    """33-byte compressed encoding (0x02/0x03 || x)."""
    return bytes([0x02 | (y & 1)]) + x.to_bytes(32, "big")


def decode_point(data: bytes) -> tuple[int, int]:
    """
    Decode a compressed (33-byte) or uncompressed (65-byte) public key.

    Args:
        data: Encoded point.

    Returns:
        Affine (x, y).

    Raises:
        ValueError: bad length, prefix, or the point is not on the curve.
    """
    if len(data) == 33 and data[0] in (0x02, 0x03):
        x = int.from_bytes(data[1:], "big")
        if x >= _P:
            raise ValueError("x coordinate out of range")
        rhs = (x * x * x + 7) % _P
        y = pow(rhs, (_P + 1) // 4, _P)
        if (y * y) % _P != rhs:
            raise ValueError("point not on curve")
        if (y & 1) != (data[0] & 1):
            y = _P - y
        return (x, y)
    if len(data) == 65 and data[0] == 0x04:
        x = int.from_bytes(data[1:33], "big")
        y = int.from_bytes(data[33:], "big")
        if x >= _P or y >= _P or not _on_curve(x, y):
            raise ValueError("point not on curve")
        return (x, y)
    raise ValueError("public key must be 33 bytes compressed or 65 bytes uncompressed")


def pubkey_from_scalar(d: int) -> bytes:
    """
    Compressed public key (33 bytes) for private scalar d.

    Args:
        d: Private scalar, 0 < d < n.

    Returns:
        33-byte compressed public key.
    """
    if not is_valid_scalar(d):
        raise ValueError("invalid private scalar")
    return encode_point(*_point_mul(d, _Gx, _Gy))


def pubkey_tweak_add(pubkey: bytes, tweak: int) -> bytes:
    """Compressed encoding of pubkey + tweak * G."""
    if not is_valid_scalar(tweak):
        raise ValueError("invalid tweak")
    px, py = decode_point(pubkey)
    tx, ty = _point_mul(tweak, _Gx, _Gy)
    rx, ry = _point_add(px, py, tx, ty)
    if (rx, ry) == _INFINITY:
        raise ValueError("tweaked point at infinity")
    return encode_point(rx, ry)


def _rfc6979_nonces(d: int, msg_hash: bytes):
    """Yield candidate nonces per RFC 6979 3.2 with HMAC-SHA256."""
    x = d.to_bytes(32, "big")
    h1 = (int.from_bytes(msg_hash, "big") % _N).to_bytes(32, "big")
    v = b"\x01" * 32
    k = b"\x00" * 32
    k = hmac.new(k, v + b"\x00" + x + h1, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    k = hmac.new(k, v + b"\x01" + x + h1, hashlib.sha256).digest()
    v = hmac.new(k, v, hashlib.sha256).digest()
    while True:
        v = hmac.new(k, v, hashlib.sha256).digest()
        candidate = int.from_bytes(v, "big")
        if is_valid_scalar(candidate):
            yield candidate
        k = hmac.new(k, v + b"\x00", hashlib.sha256).digest()
        v = hmac.new(k, v, hashlib.sha256).digest()


def ecdsa_sign(d: int, msg_hash: bytes) -> tuple[int, int]:
    """
    Deterministic ECDSA signature (RFC 6979), normalized to low S.

    Args:
        d: Private scalar, 0 < d < n.
        msg_hash: 32-byte message digest.

    Returns:
        (r, s) with s <= n/2.
    """
    if not is_valid_scalar(d):
        raise ValueError("invalid private scalar")
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    z = int.from_bytes(msg_hash, "big") % _N
    for k in _rfc6979_nonces(d, msg_hash):
        kx, _ = _point_mul(k, _Gx, _Gy)
        r = kx % _N
        if r == 0:
            continue
        s = _mod_inv(k, _N) * (z + r * d) % _N
        if s == 0:
            continue
        if s > _N // 2:
            s = _N - s
        return (r, s)
    raise ValueError("nonce generation exhausted")  # unreachable


def ecdsa_verify(msg_hash: bytes, r: int, s: int, pubkey: bytes) -> bool:
    """
    Verify an ECDSA signature. High-S signatures are rejected.

    Args:
        msg_hash: 32-byte message digest.
        r, s: Signature scalars.
        pubkey: Compressed or uncompressed public key.

    Returns:
        True iff the signature is valid. Undecodable keys give False.
    """
    if len(msg_hash) != 32:
        return False
    if not (is_valid_scalar(r) and is_valid_scalar(s)) or s > _N // 2:
        return False
    try:
        qx, qy = decode_point(pubkey)
    except ValueError:
        return False
    z = int.from_bytes(msg_hash, "big") % _N
    w = _mod_inv(s, _N)
    ux, uy = _point_mul(z * w % _N, _Gx, _Gy)
    vx, vy = _point_mul(r * w % _N, qx, qy)
    x, y = _point_add(ux, uy, vx, vy)
    if (x, y) == _INFINITY:
        return False
    return x % _N == r


__all__: tuple[str, ...] = (
    "CURVE_ORDER",
    "decode_point",
    "ecdsa_sign",
    "ecdsa_verify",
    "encode_point",
    "is_valid_scalar",
    "pubkey_from_scalar",
    "pubkey_tweak_add",
)
