"""JWS signing and verification services."""

from __future__ import annotations

import binascii
import json
import re
from typing import Mapping, Optional

from jwt.utils import base64url_decode, base64url_encode

from ..errors import MalformedSignature, UnsupportedAlgorithm
from ..models import SignaturePayload
from ..registry import EcdsaAlgorithm, get_algorithms
from .context import CanonicalMessage, JwsSignatureRecord, SignatureEnvelope
from .keys import KeyProvider

_ALG_FOR_CURVE = {"P-256": "ES256", "P-384": "ES384", "P-521": "ES512"}
_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*\Z")


def _b64u(data: bytes) -> bytes:
    return base64url_encode(data)


def _b64u_decode(value: str) -> bytes:
    if not _B64URL_RE.match(value):
        raise MalformedSignature("invalid characters in base64url segment")
    try:
        return base64url_decode(value)
    except (binascii.Error, ValueError) as exc:
        raise MalformedSignature(f"invalid base64url segment: {exc}") from exc


class JwsService:
    """Signs and verifies messages using JSON Web Signatures.

    The service operates on canonical message representations to ensure
    deterministic signing input.  Signatures are produced in detached payload
    form (``<header>..<signature>``) using ES256, ES384 or ES512.
    """

    def __init__(
        self,
        key_provider: KeyProvider,
        algorithms: Optional[Mapping[str, EcdsaAlgorithm]] = None,
    ) -> None:
        self.key_provider = key_provider
        self.algorithms = algorithms if algorithms is not None else get_algorithms()

    def _algorithm(self, alg: str) -> EcdsaAlgorithm:
        try:
            return self.algorithms[alg]
        except KeyError:
            raise UnsupportedAlgorithm(f"unsupported algorithm: {alg}") from None

    @staticmethod
    def _signing_input(header_b64: bytes, message: CanonicalMessage) -> bytes:
        return header_b64 + b"." + _b64u(message.canonical_bytes())

    async def sign(
        self, message: CanonicalMessage, alg: Optional[str] = None
    ) -> SignatureEnvelope:
        """Sign ``message`` and return the signature envelope.

        ``alg`` defaults to the algorithm matching the signing key's curve.
        """
        kid, key = await self.key_provider.get_signing_key()
        alg = alg or _ALG_FOR_CURVE.get(key.curve, "ES256")
        algorithm = self._algorithm(alg)

        header = json.dumps({"alg": alg, "kid": kid}, separators=(",", ":"))
        header_b64 = _b64u(header.encode("utf-8"))
        result = await algorithm.sign(key, self._signing_input(header_b64, message))

        compact = header_b64 + b".." + _b64u(result.mac)
        return SignatureEnvelope(
            message=message,
            signature=JwsSignatureRecord(
                kid=kid, algorithm=alg, signature=compact.decode("ascii")
            ),
        )

    async def verify(self, envelope: SignatureEnvelope) -> SignaturePayload:
        """Verify the signature for the given ``envelope``.

        Raises ``VerificationFailed`` when the signature does not match.
        """
        record = envelope.signature
        parts = record.signature.split(".")
        if len(parts) != 3 or parts[1]:
            raise MalformedSignature("expected detached compact JWS")
        header_b64, _, signature_b64 = parts

        try:
            header = json.loads(_b64u_decode(header_b64))
        except ValueError as exc:
            raise MalformedSignature(f"invalid JWS header: {exc}") from exc
        if not isinstance(header, dict):
            raise MalformedSignature("JWS header must be an object")
        if header.get("alg") != record.algorithm or header.get("kid") != record.kid:
            raise MalformedSignature("JWS header does not match signature record")

        algorithm = self._algorithm(record.algorithm)
        key = await self.key_provider.get_verification_key(record.kid)
        return await algorithm.verify(
            key,
            self._signing_input(header_b64.encode("ascii"), envelope.message),
            _b64u_decode(signature_b64),
        )
