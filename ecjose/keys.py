"""EC keys in JWK form and their conversions.

A :class:`Key` is the common representation every backend starts from.  The
native backend wants ``cryptography`` key objects, the platform backend wants
a JWK dictionary and the software backend wants raw integers; the helpers
here produce each of those forms.
"""

from __future__ import annotations

import binascii
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jwt.utils import base64url_decode, base64url_encode
from pydantic import BaseModel, ConfigDict, Field

from .curves import width_for
from .errors import InvalidCurve, InvalidKey

_EC_CURVES = {
    "P-256": ec.SECP256R1,
    "P-384": ec.SECP384R1,
    "P-521": ec.SECP521R1,
}

_CURVE_NAMES = {cls.name: crv for crv, cls in _EC_CURVES.items()}

CryptographyKey = Union[ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey]


def _b64u_to_int(value: str) -> int:
    try:
        return int.from_bytes(base64url_decode(value), "big")
    except (binascii.Error, ValueError) as exc:
        raise InvalidKey(f"invalid base64url key parameter: {exc}") from exc


def _int_to_b64u(value: int, width: int) -> str:
    try:
        raw = value.to_bytes(width, "big")
    except OverflowError as exc:
        raise InvalidKey(f"key parameter exceeds {width} bytes") from exc
    return base64url_encode(raw).decode("ascii")


def _ec_curve(crv: str) -> ec.EllipticCurve:
    try:
        return _EC_CURVES[crv]()
    except KeyError:
        raise InvalidCurve(f"unsupported curve: {crv}") from None


class Key(BaseModel):
    """An elliptic curve key in JWK (RFC 7518 section 6.2) form."""

    model_config = ConfigDict(frozen=True)

    kty: Literal["EC"] = "EC"
    crv: str = Field(..., description="Curve name, e.g. P-256")
    x: str = Field(..., description="base64url x coordinate")
    y: str = Field(..., description="base64url y coordinate")
    d: Optional[str] = Field(default=None, description="base64url private scalar")
    kid: Optional[str] = Field(default=None, description="Key identifier")

    @property
    def curve(self) -> str:
        return self.crv

    @property
    def is_private(self) -> bool:
        return self.d is not None

    def public_numbers(self) -> Tuple[int, int]:
        return _b64u_to_int(self.x), _b64u_to_int(self.y)

    def private_value(self) -> int:
        if self.d is None:
            raise InvalidKey("private key parameter 'd' required for signing")
        return _b64u_to_int(self.d)

    def public_key(self) -> "Key":
        return self.model_copy(update={"d": None})

    def to_jwk(self, private: bool = False) -> Dict[str, Any]:
        """Return the key as a JWK dictionary.

        Coordinates are re-encoded at the curve's full width, which some
        importers insist on.
        """
        width = width_for(self.crv)
        x, y = self.public_numbers()
        jwk: Dict[str, Any] = {
            "kty": "EC",
            "crv": self.crv,
            "x": _int_to_b64u(x, width),
            "y": _int_to_b64u(y, width),
        }
        if private:
            jwk["d"] = _int_to_b64u(self.private_value(), width)
        if self.kid is not None:
            jwk["kid"] = self.kid
        return jwk

    def to_cryptography(self, private: bool = False) -> CryptographyKey:
        curve = _ec_curve(self.crv)
        x, y = self.public_numbers()
        try:
            if private:
                return ec.derive_private_key(self.private_value(), curve)
            return ec.EllipticCurvePublicNumbers(x=x, y=y, curve=curve).public_key()
        except ValueError as exc:
            raise InvalidKey(str(exc)) from exc

    def to_pem(self, private: bool = False) -> bytes:
        key = self.to_cryptography(private=private)
        if private:
            return key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        return key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    @classmethod
    def from_jwk(cls, jwk: Mapping[str, Any]) -> "Key":
        if not isinstance(jwk, Mapping):
            raise InvalidKey("JWK must be a JSON object")
        fields = {k: jwk[k] for k in ("kty", "crv", "x", "y", "d", "kid") if k in jwk}
        if fields.get("kty") != "EC":
            raise InvalidKey(f"not an EC key: kty={fields.get('kty')!r}")
        try:
            return cls(**fields)
        except ValueError as exc:
            raise InvalidKey(str(exc)) from exc

    @classmethod
    def from_cryptography(cls, key: CryptographyKey, kid: Optional[str] = None) -> "Key":
        try:
            crv = _CURVE_NAMES[key.curve.name]
        except KeyError:
            raise InvalidCurve(f"unsupported curve: {key.curve.name}") from None
        width = width_for(crv)
        if isinstance(key, ec.EllipticCurvePrivateKey):
            d: Optional[str] = _int_to_b64u(key.private_numbers().private_value, width)
            numbers = key.public_key().public_numbers()
        else:
            d = None
            numbers = key.public_numbers()
        return cls(
            crv=crv,
            x=_int_to_b64u(numbers.x, width),
            y=_int_to_b64u(numbers.y, width),
            d=d,
            kid=kid,
        )

    @classmethod
    def from_pem(
        cls, data: bytes, password: Optional[bytes] = None, kid: Optional[str] = None
    ) -> "Key":
        try:
            if b"PRIVATE KEY" in data:
                key = serialization.load_pem_private_key(data, password=password)
            else:
                key = serialization.load_pem_public_key(data)
        except (TypeError, ValueError) as exc:
            raise InvalidKey(f"unable to load PEM key: {exc}") from exc
        if not isinstance(key, (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey)):
            raise InvalidKey("PEM does not contain an EC key")
        return cls.from_cryptography(key, kid=kid)

    @classmethod
    def generate(cls, crv: str = "P-256", kid: Optional[str] = None) -> "Key":
        return cls.from_cryptography(ec.generate_private_key(_ec_curve(crv)), kid=kid)


__all__ = ["Key"]
