"""Tests for EC key conversions."""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from jwt.utils import base64url_decode
from pydantic import ValidationError

from ecjose.errors import InvalidCurve, InvalidKey
from ecjose.keys import Key


@pytest.mark.parametrize("crv,width", [("P-256", 32), ("P-384", 48), ("P-521", 66)])
def test_generate_pads_coordinates(crv, width):
    key = Key.generate(crv, kid="k1")
    jwk = key.to_jwk(private=True)

    assert key.curve == crv
    assert key.is_private
    assert jwk["kid"] == "k1"
    for name in ("x", "y", "d"):
        assert len(base64url_decode(jwk[name])) == width


def test_public_key_strips_private_material():
    key = Key.generate("P-256")
    public = key.public_key()

    assert public.d is None
    assert not public.is_private
    assert public.public_numbers() == key.public_numbers()
    assert "d" not in public.to_jwk()
    with pytest.raises(InvalidKey):
        public.private_value()
    with pytest.raises(InvalidKey):
        public.to_jwk(private=True)


def test_jwk_round_trip():
    key = Key.generate("P-384", kid="round")
    assert Key.from_jwk(key.to_jwk(private=True)) == key


def test_pem_round_trip():
    key = Key.generate("P-521")
    assert Key.from_pem(key.to_pem(private=True)) == key
    assert Key.from_pem(key.to_pem()) == key.public_key()


def test_cryptography_conversion():
    key = Key.generate("P-256")
    private = key.to_cryptography(private=True)
    public = key.to_cryptography()

    assert isinstance(private, ec.EllipticCurvePrivateKey)
    assert isinstance(public, ec.EllipticCurvePublicKey)
    assert private.private_numbers().private_value == key.private_value()
    assert Key.from_cryptography(public) == key.public_key()


def test_from_jwk_rejects_other_key_types():
    with pytest.raises(InvalidKey):
        Key.from_jwk({"kty": "RSA", "n": "AQAB", "e": "AQAB"})
    with pytest.raises(InvalidKey):
        Key.from_jwk({"kty": "EC", "crv": "P-256"})


def test_unsupported_curve():
    with pytest.raises(InvalidCurve):
        Key.generate("secp256k1")
    key = Key(crv="secp256k1", x="AQ", y="AQ")
    with pytest.raises(InvalidCurve):
        key.to_cryptography()


def test_invalid_point_rejected():
    key = Key.generate("P-256")
    broken = key.model_copy(update={"y": key.x})
    with pytest.raises(InvalidKey):
        broken.to_cryptography()


def test_invalid_pem_rejected():
    with pytest.raises(InvalidKey):
        Key.from_pem(b"-----BEGIN PUBLIC KEY-----\nnope\n-----END PUBLIC KEY-----\n")


def test_keys_are_immutable():
    key = Key.generate("P-256")
    with pytest.raises(ValidationError):
        key.crv = "P-384"


@pytest.mark.parametrize("value", [5, [1, 2], "EC"])
def test_from_jwk_requires_mapping(value):
    with pytest.raises(InvalidKey):
        Key.from_jwk(value)
