"""Static mapping from algorithm to hash, curve and coordinate width."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidCurve, UnsupportedAlgorithm, UnsupportedHash

ALGORITHM_IDS = ("ES256", "ES384", "ES512")

_ALGORITHM_RE = re.compile(r"^ES(256|384|512)$")

_CURVES = {
    "SHA-256": "P-256",
    "SHA-384": "P-384",
    "SHA-512": "P-521",
}

# Byte length of the curve order, not bits/8: P-521 needs 66 bytes.
_WIDTHS = {
    "P-256": 32,
    "P-384": 48,
    "P-521": 66,
}


@dataclass(frozen=True)
class CurveParams:
    """The (hash, curve, width) triple a backend is bound to."""

    hash: str
    curve: str
    width: int


def hash_for_algorithm(alg: str) -> str:
    """Return the hash name for ``alg``, e.g. ``ES384`` -> ``SHA-384``."""
    if not _ALGORITHM_RE.match(alg):
        raise UnsupportedAlgorithm(f"unsupported algorithm: {alg}")
    return _ALGORITHM_RE.sub(r"SHA-\1", alg)


def curve_for(hash_name: str) -> str:
    try:
        return _CURVES[hash_name]
    except KeyError:
        raise UnsupportedHash(f"unsupported hash: {hash_name}") from None


def width_for(curve: str) -> int:
    try:
        return _WIDTHS[curve]
    except KeyError:
        raise InvalidCurve(f"unsupported curve: {curve}") from None


def curve_params(hash_name: str) -> CurveParams:
    curve = curve_for(hash_name)
    return CurveParams(hash=hash_name, curve=curve, width=width_for(curve))


__all__ = [
    "ALGORITHM_IDS",
    "CurveParams",
    "hash_for_algorithm",
    "curve_for",
    "width_for",
    "curve_params",
]
