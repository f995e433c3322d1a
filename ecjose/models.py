"""Result models shared by every signing backend."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SignaturePayload(BaseModel):
    """Data together with its fixed-width ``r || s`` signature.

    ``valid`` is only set by a successful verification; a failed one raises
    :class:`~ecjose.errors.VerificationFailed` instead.
    """

    data: bytes = Field(..., description="Signed message bytes")
    mac: bytes = Field(..., description="Concatenated r || s signature")
    valid: Optional[bool] = Field(default=None, description="Set on verify")
