from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hmac

from .crypto_backend import AlgorithmSpec, CryptoBackend


class HmacBackend(CryptoBackend):
    """
    HS256 / HS384 / HS512. The shared secret is used as raw UTF-8 bytes,
    with no further decoding.
    """

    family = "HS"

    def import_key(self, spec: AlgorithmSpec, key_material: str) -> bytes:
        return key_material.encode("utf-8")

    def verify(self, spec: AlgorithmSpec, key: bytes, data: bytes, signature: bytes) -> bool:
        mac = hmac.HMAC(key, spec.hash())
        mac.update(data)
        try:
            # constant-time compare
            mac.verify(signature)
            return True
        except InvalidSignature:
            return False
