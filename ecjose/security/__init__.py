"""Detached JWS built on the ECDSA algorithm registry."""

from __future__ import annotations

from .context import CanonicalMessage, JwsSignatureRecord, SignatureEnvelope
from .jws import JwsService
from .keys import KeyProvider, StaticKeyProvider

__all__ = [
    "CanonicalMessage",
    "JwsSignatureRecord",
    "SignatureEnvelope",
    "JwsService",
    "KeyProvider",
    "StaticKeyProvider",
]
