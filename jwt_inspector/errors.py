from __future__ import annotations


class TokenParseError(ValueError):
    """Raised when a compact JWS string cannot be turned into a Token."""

    reason = "malformed_token"


class MalformedStructure(TokenParseError):
    """Token does not split into exactly 3 dot-separated segments."""

    reason = "invalid_segment_count"

    def __init__(self, segment_count: int) -> None:
        self.segment_count = segment_count
        super().__init__(
            f"Invalid JWT format: expected 3 segments separated by dots, got {segment_count}"
        )


class InvalidEncoding(TokenParseError):
    """A segment is not valid base64url."""

    reason = "malformed_base64"

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"Invalid base64 encoding in {segment}")


class InvalidJSON(TokenParseError):
    """A decoded segment is not a JSON object."""

    reason = "malformed_json"

    def __init__(self, segment: str, detail: str) -> None:
        self.segment = segment
        self.detail = detail
        super().__init__(f"Invalid JSON in {segment}: {detail}")


class VerificationError(Exception):
    """Base class for failures that prevent a signature from being evaluated."""
    pass


class UnsupportedAlgorithm(VerificationError):
    def __init__(self, alg: str) -> None:
        self.alg = alg
        super().__init__("Unsupported algorithm")


class KeyImportError(VerificationError):
    """Key material cannot be imported for the requested algorithm."""
    pass


class CryptoFailure(VerificationError):
    """The underlying primitive raised something other than a signature mismatch."""
    pass
