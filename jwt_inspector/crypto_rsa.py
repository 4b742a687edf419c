from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from .crypto_backend import AlgorithmSpec, CryptoBackend
from .errors import KeyImportError
from .keys import load_spki_public_key


class RsaBackend(CryptoBackend):
    """
    RS256 / RS384 / RS512: RSASSA-PKCS1-v1_5 over a PEM SPKI public key.
    """

    family = "RS"

    def import_key(self, spec: AlgorithmSpec, key_material: str) -> RSAPublicKey:
        key = load_spki_public_key(key_material)
        if not isinstance(key, RSAPublicKey):
            raise KeyImportError(f"{spec.name} requires an RSA public key")
        return key

    def verify(self, spec: AlgorithmSpec, key: RSAPublicKey, data: bytes, signature: bytes) -> bool:
        try:
            key.verify(signature, data, padding.PKCS1v15(), spec.hash())
            return True
        except InvalidSignature:
            return False
