"""Registry of the ES256, ES384 and ES512 algorithms.

Each entry wires the backends that are usable in this process through
:func:`~ecjose.dispatch.setup_fallback`.  Capability checks run once, when
the registry is built, and the resulting mapping is read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .backends import get_backend
from .config import EcJoseConfig, load_config
from .curves import ALGORITHM_IDS, curve_params, hash_for_algorithm
from .dispatch import BackendFn, setup_fallback
from .errors import UnsupportedAlgorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EcdsaAlgorithm:
    """Public ``sign``/``verify`` pair for one JWA algorithm."""

    name: str
    hash: str
    curve: str
    width: int
    sign: BackendFn
    verify: BackendFn
    backend: Optional[str] = None


def _build_algorithm(name: str, config: EcJoseConfig) -> EcdsaAlgorithm:
    params = curve_params(hash_for_algorithm(name))
    candidates = [get_backend(backend, params) for backend in config.backends]
    selected = next((c.name for c in candidates if c is not None), None)
    logger.debug(
        f"{name} ({params.hash}, {params.curve}) backends: "
        + ", ".join(
            f"{backend}={'available' if c is not None else 'absent'}"
            for backend, c in zip(config.backends, candidates)
        )
    )
    return EcdsaAlgorithm(
        name=name,
        hash=params.hash,
        curve=params.curve,
        width=params.width,
        sign=setup_fallback(*(c.sign if c else None for c in candidates)),
        verify=setup_fallback(*(c.verify if c else None for c in candidates)),
        backend=selected,
    )


def build_algorithms(config: Optional[EcJoseConfig] = None) -> Mapping[str, EcdsaAlgorithm]:
    """Build a read-only mapping of algorithm id to :class:`EcdsaAlgorithm`."""

    config = config or load_config()
    algorithms = {name: _build_algorithm(name, config) for name in ALGORITHM_IDS}
    logger.info(
        "ECDSA algorithms ready: "
        + ", ".join(f"{a.name}->{a.backend or 'none'}" for a in algorithms.values())
    )
    return MappingProxyType(algorithms)


_algorithms_instance: Mapping[str, EcdsaAlgorithm] | None = None


def get_algorithms(config: Optional[EcJoseConfig] = None) -> Mapping[str, EcdsaAlgorithm]:
    """Return the process-wide algorithm mapping.

    The mapping is built on first use.  Passing ``config`` rebuilds it.
    """

    global _algorithms_instance
    if _algorithms_instance is not None and config is None:
        return _algorithms_instance

    _algorithms_instance = build_algorithms(config)
    return _algorithms_instance


def get_algorithm(name: str) -> EcdsaAlgorithm:
    try:
        return get_algorithms()[name]
    except KeyError:
        raise UnsupportedAlgorithm(f"unsupported algorithm: {name}") from None


__all__ = ["EcdsaAlgorithm", "build_algorithms", "get_algorithms", "get_algorithm"]
