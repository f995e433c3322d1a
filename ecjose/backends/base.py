"""Base interface for ECDSA signing backends."""

from __future__ import annotations

import abc

from ..curves import CurveParams
from ..errors import InvalidCurve, MalformedSignature
from ..keys import Key
from ..models import SignaturePayload


class EcdsaBackend(metaclass=abc.ABCMeta):
    """Abstract ECDSA backend bound to one (hash, curve, width) triple.

    Every backend returns and accepts signatures in the fixed-width
    ``r || s`` form regardless of what its underlying provider uses.
    """

    name: str = ""

    def __init__(self, params: CurveParams) -> None:
        self.params = params

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params.hash}, {self.params.curve})"

    @classmethod
    @abc.abstractmethod
    def is_available(cls, params: CurveParams) -> bool:
        """Return whether this backend can serve ``params`` in this process."""
        raise NotImplementedError

    def check_key(self, key: Key) -> None:
        if key.curve != self.params.curve:
            raise InvalidCurve(
                f"invalid curve: expected {self.params.curve}, got {key.curve}"
            )

    def check_mac(self, mac: bytes) -> None:
        expected = 2 * self.params.width
        if len(mac) != expected:
            raise MalformedSignature(
                f"expected {expected} byte signature, got {len(mac)}"
            )

    @abc.abstractmethod
    async def sign(self, key: Key, data: bytes) -> SignaturePayload:
        """Sign ``data`` with the private ``key``."""
        raise NotImplementedError

    @abc.abstractmethod
    async def verify(self, key: Key, data: bytes, mac: bytes) -> SignaturePayload:
        """Verify ``mac`` over ``data``; raise ``VerificationFailed`` on mismatch."""
        raise NotImplementedError
