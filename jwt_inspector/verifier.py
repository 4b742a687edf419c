"""
Signature verification over a parsed Token.

verify() never raises: every outcome is folded into a VerificationResult,
keeping "signature did not match" (INVALID) apart from "could not evaluate"
(ERROR).
"""

from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .crypto_backend import CryptoBackend, resolve_algorithm
from .crypto_ecdsa import EcdsaBackend
from .crypto_hmac import HmacBackend
from .crypto_rsa import RsaBackend
from .errors import CryptoFailure, KeyImportError, TokenParseError, UnsupportedAlgorithm
from .jose_utils import parse
from .models import Token, VerificationRequest, VerificationResult

BACKENDS: Dict[str, CryptoBackend] = {
    backend.family: backend
    for backend in (HmacBackend(), RsaBackend(), EcdsaBackend())
}


def _check(request: VerificationRequest) -> VerificationResult:
    # 1) Resolve algorithm before touching any key material
    spec = resolve_algorithm(request.algorithm)
    backend = BACKENDS[spec.family]

    # 2) Import key
    key = backend.import_key(spec, request.key_material)

    # 3) Verify over the verbatim signing input
    try:
        ok = backend.verify(spec, key, request.token.signing_input_bytes, request.token.signature)
    except Exception as exc:
        raise CryptoFailure(str(exc) or exc.__class__.__name__) from exc

    if not ok:
        return VerificationResult.invalid()
    return VerificationResult.verified()


def verify_sync(token: Token, key_material: str, algorithm: str) -> VerificationResult:
    request = VerificationRequest(token=token, key_material=key_material, algorithm=algorithm)
    try:
        return _check(request)
    except UnsupportedAlgorithm as exc:
        return VerificationResult.error(str(exc))
    except KeyImportError as exc:
        return VerificationResult.error(f"Key import failed: {exc}")
    except CryptoFailure as exc:
        return VerificationResult.error(f"Signature verification failed: {exc}")
    except Exception as exc:
        return VerificationResult.error(f"Signature verification failed: {exc}")


async def verify(token: Token, key_material: str, algorithm: str) -> VerificationResult:
    """
    Await the verdict for token under key_material / algorithm.

    The primitive runs in a worker thread; the call holds no state outside
    its own frame, so a caller may cancel it at any point.
    """
    return await asyncio.to_thread(verify_sync, token, key_material, algorithm)


async def verify_token(
    raw: str,
    key_material: str,
    algorithm: Optional[str] = None,
) -> VerificationResult:
    """
    Parse then verify. The algorithm defaults to the header's "alg"; a
    token that does not parse becomes an ERROR result.
    """
    try:
        token = parse(raw)
    except TokenParseError as exc:
        return VerificationResult.error(f"Invalid JWT: {exc}")

    alg = algorithm or token.alg
    if not alg:
        return VerificationResult.error("Token header has no alg")
    return await verify(token, key_material, alg)
