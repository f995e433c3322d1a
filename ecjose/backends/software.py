"""Pure Python backend built on the ``ecdsa`` package."""

from __future__ import annotations

from ..curves import CurveParams
from ..digest import digest
from ..errors import InvalidKey, VerificationFailed
from ..keys import Key
from ..models import SignaturePayload
from .base import EcdsaBackend

try:  # pragma: no cover - optional dependency
    import ecdsa
    from ecdsa.util import sigdecode_string, sigencode_string
except ImportError:  # pragma: no cover - optional dependency
    ecdsa = None  # type: ignore


def _curves():
    if ecdsa is None:
        return {}
    return {
        "P-256": ecdsa.NIST256p,
        "P-384": ecdsa.NIST384p,
        "P-521": ecdsa.NIST521p,
    }


class SoftwareBackend(EcdsaBackend):
    name = "software"

    def __init__(self, params: CurveParams) -> None:
        super().__init__(params)
        self._curve = _curves()[params.curve]

    @classmethod
    def is_available(cls, params: CurveParams) -> bool:
        return params.curve in _curves()

    def _signing_key(self, key: Key):
        secexp = key.private_value()
        try:
            return ecdsa.SigningKey.from_secret_exponent(secexp, curve=self._curve)
        except (ecdsa.MalformedPointError, AssertionError) as exc:
            raise InvalidKey(f"invalid private key: {exc}") from exc

    def _verifying_key(self, key: Key):
        x, y = key.public_numbers()
        width = self.params.width
        try:
            return ecdsa.VerifyingKey.from_string(
                x.to_bytes(width, "big") + y.to_bytes(width, "big"), curve=self._curve
            )
        except (ecdsa.MalformedPointError, AssertionError, OverflowError) as exc:
            raise InvalidKey(f"invalid public key: {exc}") from exc

    async def sign(self, key: Key, data: bytes) -> SignaturePayload:
        self.check_key(key)
        signing_key = self._signing_key(key)
        hashed = await digest(self.params.hash, data)
        mac = signing_key.sign_digest(hashed, sigencode=sigencode_string)
        return SignaturePayload(data=data, mac=mac)

    async def verify(self, key: Key, data: bytes, mac: bytes) -> SignaturePayload:
        self.check_key(key)
        self.check_mac(mac)
        verifying_key = self._verifying_key(key)
        hashed = await digest(self.params.hash, data)
        try:
            verifying_key.verify_digest(mac, hashed, sigdecode=sigdecode_string)
        except ecdsa.BadSignatureError:
            raise VerificationFailed("verification failed") from None
        return SignaturePayload(data=data, mac=mac, valid=True)
