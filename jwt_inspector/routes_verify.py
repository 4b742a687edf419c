from __future__ import annotations

import logging
import time

from fastapi import APIRouter

from .crypto_backend import SUPPORTED_ALGORITHMS
from .metrics import VERIFY_LATENCY_SECONDS, VERIFY_TOTAL
from .routes_decode import parse_or_reject
from .schemas import VerifyRequest, VerifyResponse
from .verifier import verify

logger = logging.getLogger("jwt_inspector.verify")

router = APIRouter(prefix="/verify", tags=["verify"])


def _alg_label(alg: str | None) -> str:
    # keep metric cardinality bounded
    return alg if alg in SUPPORTED_ALGORITHMS else "other"


@router.post("", response_model=VerifyResponse)
async def verify_token(body: VerifyRequest) -> VerifyResponse:
    # 1) Split + decode token
    token = parse_or_reject(body.token)

    alg = body.alg or token.alg
    key = body.key.strip()

    # 2) Nothing to check against
    if not key:
        VERIFY_TOTAL.labels(status="not_verified", alg=_alg_label(alg)).inc()
        return VerifyResponse(status="not_verified", reason="No key material provided", alg=alg)

    if not alg:
        VERIFY_TOTAL.labels(status="error", alg="other").inc()
        return VerifyResponse(status="error", reason="Token header has no alg", alg=None)

    # 3) Verify (with Prometheus timing)
    t0 = time.perf_counter()
    result = await verify(token, key, alg)
    elapsed = time.perf_counter() - t0
    VERIFY_LATENCY_SECONDS.observe(elapsed)
    VERIFY_TOTAL.labels(status=result.status.value, alg=_alg_label(alg)).inc()

    if not result.ok:
        logger.info("Signature not verified alg=%s status=%s reason=%s", alg, result.status.value, result.reason)

    return VerifyResponse(
        status=result.status.value,
        reason=result.reason,
        alg=alg,
        verify_time_ms=elapsed * 1000.0,
    )
