from __future__ import annotations

import logging

from fastapi import APIRouter, status

from .claims import describe_timestamps, is_expired, is_not_yet_valid
from .config import settings
from .errors import TokenParseError
from .jose_utils import b64url_encode, parse
from .metrics import DECODE_TOTAL
from .models import Token
from .schemas import DecodeRequest, DecodeResponse, TimestampInfo

logger = logging.getLogger("jwt_inspector.decode")

router = APIRouter(prefix="/decode", tags=["decode"])


class TokenRejected(Exception):
    """Raised by route handlers; rendered by main.py as an ErrorResponse."""

    def __init__(self, *, status_code: int, error: str, reason: str, detail: str | None = None) -> None:
        self.status_code = status_code
        self.error = error
        self.reason = reason
        self.detail = detail
        super().__init__(reason)


def parse_or_reject(raw: str) -> Token:
    """
    Shared by /decode and /verify: strip, size-check and parse, turning
    parse failures into 400s with the same body shape.
    """
    token_str = raw.strip()

    if len(token_str) > settings.max_token_length:
        DECODE_TOTAL.labels(outcome="too_large").inc()
        raise TokenRejected(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            error="malformed_token",
            reason="token_too_large",
        )

    try:
        token = parse(token_str)
    except TokenParseError as exc:
        DECODE_TOTAL.labels(outcome=exc.reason).inc()
        logger.info("Rejected token reason=%s: %s", exc.reason, exc)
        raise TokenRejected(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="malformed_token",
            reason=exc.reason,
            detail=str(exc),
        ) from exc

    DECODE_TOTAL.labels(outcome="ok").inc()
    return token


@router.post("", response_model=DecodeResponse)
def decode_token(body: DecodeRequest) -> DecodeResponse:
    """
    Decode header and payload without checking the signature.
    """
    token = parse_or_reject(body.token)

    timestamps = [
        TimestampInfo(
            claim=ts.claim,
            label=ts.label,
            value=ts.value,
            at=ts.at,
            relative=ts.relative,
        )
        for ts in describe_timestamps(token.payload)
    ]

    return DecodeResponse(
        alg=token.alg,
        header=token.header,
        payload=token.payload,
        signature=b64url_encode(token.signature),
        signing_input=token.signing_input,
        expired=is_expired(token.payload),
        not_yet_valid=is_not_yet_valid(token.payload),
        timestamps=timestamps,
    )
