from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Token:
    """
    Parsed representation of a compact JWS string.

    The raw_* fields are kept byte-for-byte as received: the signing input
    is the literal header + "." + payload substring, never a re-serialization
    of the decoded JSON.
    """
    raw_header: str
    raw_payload: str
    raw_signature: str
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: bytes

    @property
    def alg(self) -> Optional[str]:
        alg = self.header.get("alg")
        return alg if isinstance(alg, str) else None

    @property
    def signing_input(self) -> str:
        return f"{self.raw_header}.{self.raw_payload}"

    @property
    def signing_input_bytes(self) -> bytes:
        return self.signing_input.encode("utf-8")


class VerificationStatus(str, Enum):
    VERIFIED = "verified"
    INVALID = "invalid"
    ERROR = "error"


@dataclass(frozen=True)
class VerificationRequest:
    token: Token
    key_material: str
    algorithm: str


@dataclass(frozen=True)
class VerificationResult:
    status: VerificationStatus
    reason: str = ""

    @classmethod
    def verified(cls) -> "VerificationResult":
        return cls(VerificationStatus.VERIFIED)

    @classmethod
    def invalid(cls, reason: str = "Invalid signature") -> "VerificationResult":
        return cls(VerificationStatus.INVALID, reason)

    @classmethod
    def error(cls, reason: str) -> "VerificationResult":
        return cls(VerificationStatus.ERROR, reason)

    @property
    def ok(self) -> bool:
        return self.status is VerificationStatus.VERIFIED
