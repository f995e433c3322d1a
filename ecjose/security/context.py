"""Message and signature models for detached JWS."""

from __future__ import annotations

import json
from typing import Any, Dict

from pydantic import BaseModel, Field


class CanonicalMessage(BaseModel):
    """Canonical representation of a message used for signing."""

    payload: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, Any] = Field(default_factory=dict)

    def canonical_bytes(self) -> bytes:
        """Serialize deterministically: sorted keys, no whitespace."""
        return json.dumps(
            self.model_dump(mode="json"),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")


class JwsSignatureRecord(BaseModel):
    """Record of a JWS signature including headers and key id."""

    kid: str = Field(..., description="Key identifier used for signing")
    algorithm: str = Field(..., description="JWS algorithm")
    signature: str = Field(..., description="Detached JWS signature")


class SignatureEnvelope(BaseModel):
    """Envelope tying a canonical message to its signature record."""

    message: CanonicalMessage
    signature: JwsSignatureRecord
