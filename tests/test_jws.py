"""Tests for detached JWS signing over canonical messages."""

import json

import pytest
from jwt.utils import base64url_decode

from ecjose import EcJoseConfig, Key, build_algorithms
from ecjose.errors import (
    InvalidCurve,
    InvalidKey,
    MalformedSignature,
    UnknownKey,
    UnsupportedAlgorithm,
    VerificationFailed,
)
from ecjose.security import (
    CanonicalMessage,
    JwsService,
    SignatureEnvelope,
    StaticKeyProvider,
)


@pytest.fixture(scope="module")
def algorithms():
    return build_algorithms(EcJoseConfig())


def _service(algorithms, crv="P-256", kid="signer"):
    key = Key.generate(crv, kid=kid)
    return JwsService(StaticKeyProvider(signing_key=key), algorithms=algorithms)


def _message():
    return CanonicalMessage(
        payload={"b": 2, "a": [1, 2, 3]},
        headers={"content-type": "application/json"},
    )


def test_canonical_bytes_are_sorted_and_compact():
    message = CanonicalMessage(payload={"b": 1, "a": 2})
    assert message.canonical_bytes() == b'{"headers":{},"payload":{"a":2,"b":1}}'


@pytest.mark.asyncio
@pytest.mark.parametrize("crv,alg", [("P-256", "ES256"), ("P-384", "ES384"), ("P-521", "ES512")])
async def test_sign_and_verify(algorithms, crv, alg):
    service = _service(algorithms, crv=crv)

    envelope = await service.sign(_message())
    assert envelope.signature.algorithm == alg
    assert envelope.signature.kid == "signer"

    header_b64, payload, signature_b64 = envelope.signature.signature.split(".")
    assert payload == ""
    assert json.loads(base64url_decode(header_b64)) == {"alg": alg, "kid": "signer"}
    assert len(base64url_decode(signature_b64)) == {"ES256": 64, "ES384": 96, "ES512": 132}[alg]

    result = await service.verify(envelope)
    assert result.valid is True


@pytest.mark.asyncio
async def test_envelope_survives_serialization(algorithms):
    service = _service(algorithms)
    envelope = await service.sign(_message())

    restored = SignatureEnvelope.model_validate_json(envelope.model_dump_json())
    assert (await service.verify(restored)).valid is True


@pytest.mark.asyncio
async def test_tampered_payload_rejected(algorithms):
    service = _service(algorithms)
    envelope = await service.sign(_message())

    tampered = envelope.model_copy(
        update={"message": CanonicalMessage(payload={"b": 3, "a": [1, 2, 3]})}
    )
    with pytest.raises(VerificationFailed):
        await service.verify(tampered)


@pytest.mark.asyncio
async def test_unknown_kid_rejected(algorithms):
    signer = _service(algorithms, kid="signer")
    envelope = await signer.sign(_message())

    other = _service(algorithms, kid="someone-else")
    forged = envelope.model_copy(
        update={"signature": envelope.signature.model_copy(update={"kid": "nobody"})}
    )
    with pytest.raises(UnknownKey):
        await other.verify(envelope)
    with pytest.raises(MalformedSignature):
        await signer.verify(forged)


@pytest.mark.asyncio
async def test_verification_keys_from_provider(algorithms):
    signing_key = Key.generate("P-256", kid="rotating")
    signer = JwsService(StaticKeyProvider(signing_key=signing_key), algorithms=algorithms)
    verifier = JwsService(
        StaticKeyProvider(verification_keys={"rotating": signing_key.public_key()}),
        algorithms=algorithms,
    )

    envelope = await signer.sign(_message())
    assert (await verifier.verify(envelope)).valid is True
    with pytest.raises(InvalidKey):
        await verifier.sign(_message())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "signature",
    ["only.two", "a.b.c", "!!!..AAAA", "eyJhbGciOiJFUzI1NiJ9..AAAA"],
)
async def test_malformed_compact_rejected(algorithms, signature):
    service = _service(algorithms)
    envelope = await service.sign(_message())
    broken = envelope.model_copy(
        update={"signature": envelope.signature.model_copy(update={"signature": signature})}
    )
    with pytest.raises(MalformedSignature):
        await service.verify(broken)


@pytest.mark.asyncio
async def test_algorithm_must_match_key(algorithms):
    service = _service(algorithms, crv="P-384")
    with pytest.raises(InvalidCurve):
        await service.sign(_message(), alg="ES256")
    with pytest.raises(UnsupportedAlgorithm):
        await service.sign(_message(), alg="HS256")


def test_signing_key_requirements():
    with pytest.raises(InvalidKey):
        StaticKeyProvider(signing_key=Key.generate("P-256", kid="pub").public_key())
    with pytest.raises(InvalidKey):
        StaticKeyProvider(signing_key=Key.generate("P-256"))


@pytest.mark.asyncio
@pytest.mark.parametrize("junk", ["*", "é", " ", "="])
async def test_non_base64url_characters_rejected(algorithms, junk):
    service = _service(algorithms)
    envelope = await service.sign(_message())
    header_b64, _, signature_b64 = envelope.signature.signature.split(".")

    for compact in (
        f"{header_b64}{junk}..{signature_b64}",
        f"{header_b64}..{signature_b64}{junk}",
    ):
        broken = envelope.model_copy(
            update={"signature": envelope.signature.model_copy(update={"signature": compact})}
        )
        with pytest.raises(MalformedSignature):
            await service.verify(broken)
