"""Exceptions raised by picokeypairs."""


class KeypairsError(Exception):
    """Base class for every error picokeypairs raises on purpose."""


class ValidationError(KeypairsError, ValueError):
    """Caller misuse: short entropy, malformed private key, non-bytes message, bad hex."""


class DecodeError(KeypairsError, ValueError):
    """Malformed external data: seed string, DER signature, node public key, address."""


class KeypairIntegrityError(KeypairsError):
    """
    A derived keypair failed its own sign/verify self-check, or the key
    candidate search ran out of indices. Indicates a defect, not bad input.
    """


__all__: tuple[str, ...] = (
    "DecodeError",
    "KeypairIntegrityError",
    "KeypairsError",
    "ValidationError",
)
