"""Backend using PyJWT's JWA implementation of ECDSA.

PyJWT imports keys from JWK and works on raw ``r || s`` signatures, hashing
internally, so no transcoding happens on this side.
"""

from __future__ import annotations

from jwt.algorithms import ECAlgorithm, has_crypto
from jwt.exceptions import InvalidKeyError

from ..curves import CurveParams
from ..errors import InvalidKey, VerificationFailed
from ..keys import Key
from ..models import SignaturePayload
from .base import EcdsaBackend


class PlatformBackend(EcdsaBackend):
    name = "platform"

    def __init__(self, params: CurveParams) -> None:
        super().__init__(params)
        bits = params.hash.split("-", 1)[1]
        self._algorithm = ECAlgorithm(getattr(ECAlgorithm, f"SHA{bits}"))

    @classmethod
    def is_available(cls, params: CurveParams) -> bool:
        if not has_crypto:
            return False
        return hasattr(ECAlgorithm, "SHA" + params.hash.split("-", 1)[-1])

    def _import_key(self, key: Key, private: bool):
        jwk = key.to_jwk(private=private)
        try:
            return self._algorithm.from_jwk(jwk)
        except (InvalidKeyError, ValueError) as exc:
            raise InvalidKey(f"unable to import key: {exc}") from exc

    async def sign(self, key: Key, data: bytes) -> SignaturePayload:
        self.check_key(key)
        private_key = self._import_key(key, private=True)
        mac = self._algorithm.sign(data, private_key)
        return SignaturePayload(data=data, mac=mac)

    async def verify(self, key: Key, data: bytes, mac: bytes) -> SignaturePayload:
        self.check_key(key)
        self.check_mac(mac)
        public_key = self._import_key(key, private=False)
        if not self._algorithm.verify(data, public_key, mac):
            raise VerificationFailed("verification failed")
        return SignaturePayload(data=data, mac=mac, valid=True)
