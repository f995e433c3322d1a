"""Backend using OpenSSL through the ``cryptography`` package.

OpenSSL produces and consumes DER signatures, so this is the one backend that
goes through :mod:`ecjose.codec`.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from ..codec import concat_to_der, der_to_concat
from ..curves import CurveParams
from ..errors import VerificationFailed
from ..keys import Key
from ..models import SignaturePayload
from .base import EcdsaBackend

_HASHES = {
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
}


class NativeBackend(EcdsaBackend):
    name = "native"

    def __init__(self, params: CurveParams) -> None:
        super().__init__(params)
        self._algorithm = ec.ECDSA(_HASHES[params.hash]())

    @classmethod
    def is_available(cls, params: CurveParams) -> bool:
        hash_cls = _HASHES.get(params.hash)
        if hash_cls is None:
            return False
        try:
            hashes.Hash(hash_cls())
        except UnsupportedAlgorithm:
            return False
        return True

    async def sign(self, key: Key, data: bytes) -> SignaturePayload:
        self.check_key(key)
        private_key = key.to_cryptography(private=True)
        der = private_key.sign(data, self._algorithm)
        return SignaturePayload(data=data, mac=der_to_concat(der, self.params.width))

    async def verify(self, key: Key, data: bytes, mac: bytes) -> SignaturePayload:
        self.check_key(key)
        self.check_mac(mac)
        public_key = key.to_cryptography(private=False)
        try:
            public_key.verify(
                concat_to_der(mac, self.params.width), data, self._algorithm
            )
        except InvalidSignature:
            raise VerificationFailed("verification failed") from None
        return SignaturePayload(data=data, mac=mac, valid=True)
