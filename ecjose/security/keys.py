"""Key providers for JWS signing and verification."""

from __future__ import annotations

import abc
from typing import Dict, Mapping, Optional, Tuple

from ..errors import InvalidKey, UnknownKey
from ..keys import Key


class KeyProvider(metaclass=abc.ABCMeta):
    """Provides signing and verification keys with rotation support."""

    @abc.abstractmethod
    async def get_signing_key(self) -> Tuple[str, Key]:
        """Return ``(kid, key)`` for the current private signing key."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_verification_keys(self) -> Dict[str, Key]:
        """Return mapping of ``kid`` to public keys for verification."""
        raise NotImplementedError

    async def get_verification_key(self, kid: str) -> Key:
        keys = await self.get_verification_keys()
        try:
            return keys[kid]
        except KeyError:
            raise UnknownKey(kid) from None


class StaticKeyProvider(KeyProvider):
    """Key provider backed by an in-memory key set.

    Verification keys are exposed in public form only.  The signing key, if
    any, is also published for verification under its ``kid``.
    """

    def __init__(
        self,
        signing_key: Optional[Key] = None,
        verification_keys: Optional[Mapping[str, Key]] = None,
    ) -> None:
        if signing_key is not None:
            if not signing_key.is_private:
                raise InvalidKey("signing key must include private material")
            if not signing_key.kid:
                raise InvalidKey("signing key must have a kid")
        self._signing_key = signing_key
        self._verification_keys = {
            kid: key.public_key() for kid, key in (verification_keys or {}).items()
        }
        if signing_key is not None:
            self._verification_keys.setdefault(
                signing_key.kid, signing_key.public_key()
            )

    async def get_signing_key(self) -> Tuple[str, Key]:
        if self._signing_key is None:
            raise InvalidKey("no signing key configured")
        return self._signing_key.kid, self._signing_key

    async def get_verification_keys(self) -> Dict[str, Key]:
        return dict(self._verification_keys)
