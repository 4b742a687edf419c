"""
jwt-inspector: decode compact JWS tokens and verify their signatures.
"""

from .errors import (
    CryptoFailure,
    InvalidEncoding,
    InvalidJSON,
    KeyImportError,
    MalformedStructure,
    TokenParseError,
    UnsupportedAlgorithm,
    VerificationError,
)
from .jose_utils import parse
from .models import Token, VerificationRequest, VerificationResult, VerificationStatus
from .verifier import verify, verify_sync, verify_token

__all__ = [
    "parse",
    "verify",
    "verify_sync",
    "verify_token",
    "Token",
    "VerificationRequest",
    "VerificationResult",
    "VerificationStatus",
    "TokenParseError",
    "MalformedStructure",
    "InvalidEncoding",
    "InvalidJSON",
    "VerificationError",
    "UnsupportedAlgorithm",
    "KeyImportError",
    "CryptoFailure",
]
