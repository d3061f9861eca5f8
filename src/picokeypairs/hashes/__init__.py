"""Hash functions: SHA-512Half, RIPEMD-160, Hash160."""

from .ripemd160 import hash160, ripemd160
from .sha512 import sha512_half, sha512_half_u32

__all__: tuple[str, ...] = ("hash160", "ripemd160", "sha512_half", "sha512_half_u32")
