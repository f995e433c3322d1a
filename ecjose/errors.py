"""Exception hierarchy for ECDSA signing and verification."""

from __future__ import annotations


class EcJoseError(Exception):
    """Base class for all errors raised by ecjose."""


class UnsupportedHash(EcJoseError, ValueError):
    """Raised when a hash name has no curve mapping."""


class UnsupportedAlgorithm(EcJoseError, ValueError):
    """Raised for algorithm identifiers other than ES256/ES384/ES512."""


class InvalidCurve(EcJoseError, ValueError):
    """Raised when a key's curve does not match the algorithm's curve."""


class InvalidKey(EcJoseError, ValueError):
    """Raised when key material is missing or cannot be converted."""


class MalformedSignature(EcJoseError, ValueError):
    """Raised when a signature has the wrong length or DER structure."""


class VerificationFailed(EcJoseError):
    """Raised when a signature does not verify against the data."""


class NoBackendAvailable(EcJoseError):
    """Raised when no signing backend is usable in this environment."""


class UnknownKey(EcJoseError, KeyError):
    """Raised when a key id cannot be resolved by a key provider."""


__all__ = [
    "EcJoseError",
    "UnsupportedHash",
    "UnsupportedAlgorithm",
    "InvalidCurve",
    "InvalidKey",
    "MalformedSignature",
    "VerificationFailed",
    "NoBackendAvailable",
    "UnknownKey",
]
