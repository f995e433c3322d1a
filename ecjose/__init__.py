"""ecjose: ECDSA (ES256/ES384/ES512) signing with backend fallback."""

from .codec import concat_to_der, der_to_concat
from .config import EcJoseConfig, load_config
from .curves import ALGORITHM_IDS, CurveParams, curve_for, curve_params, width_for
from .dispatch import setup_fallback
from .errors import (
    EcJoseError,
    InvalidCurve,
    InvalidKey,
    MalformedSignature,
    NoBackendAvailable,
    UnknownKey,
    UnsupportedAlgorithm,
    UnsupportedHash,
    VerificationFailed,
)
from .keys import Key
from .models import SignaturePayload
from .registry import EcdsaAlgorithm, build_algorithms, get_algorithm, get_algorithms

__version__ = "0.1.0"
__all__ = [
    "ALGORITHM_IDS",
    "CurveParams",
    "EcJoseConfig",
    "EcdsaAlgorithm",
    "Key",
    "SignaturePayload",
    "build_algorithms",
    "concat_to_der",
    "curve_for",
    "curve_params",
    "der_to_concat",
    "get_algorithm",
    "get_algorithms",
    "load_config",
    "setup_fallback",
    "width_for",
    "EcJoseError",
    "InvalidCurve",
    "InvalidKey",
    "MalformedSignature",
    "NoBackendAvailable",
    "UnknownKey",
    "UnsupportedAlgorithm",
    "UnsupportedHash",
    "VerificationFailed",
]
