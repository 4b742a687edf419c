from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class DecodeRequest(BaseModel):
    token: str = Field(..., description="Compact JWS: header.payload.signature")


class TimestampInfo(BaseModel):
    claim: str
    label: str
    value: float
    at: datetime
    relative: str


class DecodeResponse(BaseModel):
    """
    Response from /decode
    """
    alg: str | None = None
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: str
    signing_input: str
    expired: bool = False
    not_yet_valid: bool = False
    timestamps: List[TimestampInfo] = Field(default_factory=list)


class VerifyRequest(BaseModel):
    """
    Request body for /verify
    """
    token: str
    key: str = Field(
        default="",
        description="Shared secret for HS*, PEM-encoded SPKI public key for RS*/ES*.",
    )
    alg: str | None = Field(
        default=None,
        description="Algorithm to verify with; defaults to the token header's alg.",
    )


class VerifyResponse(BaseModel):
    status: Literal["verified", "invalid", "error", "not_verified"]
    reason: str = ""
    alg: str | None = None
    verify_time_ms: float | None = None


class ErrorResponse(BaseModel):
    error: str
    reason: str
    detail: str | None = None
