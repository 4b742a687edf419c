from __future__ import annotations

import base64
import binascii
import re
from functools import lru_cache
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm as BackendUnsupported
from cryptography.hazmat.primitives import serialization

from .config import settings
from .errors import KeyImportError

# Armor lines such as "-----BEGIN PUBLIC KEY-----"
PEM_ARMOR_RE = re.compile(r"-----(BEGIN|END)[^\n]*?-----")
WHITESPACE_RE = re.compile(r"\s+")


def pem_to_der(pem: str) -> bytes:
    """
    Strip the BEGIN/END delimiters and all whitespace from a PEM block and
    base64-decode what is left.
    """
    body = PEM_ARMOR_RE.sub("", pem)
    body = WHITESPACE_RE.sub("", body)
    if not body:
        raise KeyImportError("Key material contains no base64 body")
    try:
        return base64.b64decode(body.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise KeyImportError(f"Invalid base64 in PEM body: {exc}") from None


@lru_cache(maxsize=settings.key_cache_size)
def load_spki_public_key(pem: str) -> Any:
    """
    Load a PEM-encoded SubjectPublicKeyInfo as a public key object.

    Cached on the PEM text; the same text always yields the same key, so
    caching is not observable. Failures are raised, never cached.
    """
    der = pem_to_der(pem)
    try:
        return serialization.load_der_public_key(der)
    except (ValueError, BackendUnsupported) as exc:
        raise KeyImportError(f"Could not import public key: {exc}") from None
