"""Backend factory and capability lookup."""

from __future__ import annotations

from typing import Dict, Optional, Type

from ..curves import CurveParams
from .base import EcdsaBackend
from .native import NativeBackend
from .jwa import PlatformBackend
from .software import SoftwareBackend

# Default preference order: fastest first.
BACKENDS: Dict[str, Type[EcdsaBackend]] = {
    NativeBackend.name: NativeBackend,
    PlatformBackend.name: PlatformBackend,
    SoftwareBackend.name: SoftwareBackend,
}


def get_backend(name: str, params: CurveParams) -> Optional[EcdsaBackend]:
    """Return backend ``name`` bound to ``params``, or ``None`` if unusable."""

    try:
        backend_cls = BACKENDS[name.lower()]
    except KeyError:
        raise ValueError(f"Unsupported ECDSA backend: {name}") from None

    if not backend_cls.is_available(params):
        return None
    return backend_cls(params)


__all__ = [
    "BACKENDS",
    "EcdsaBackend",
    "NativeBackend",
    "PlatformBackend",
    "SoftwareBackend",
    "get_backend",
]
