from __future__ import annotations

from typing import Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

from .crypto_backend import AlgorithmSpec, CryptoBackend
from .errors import KeyImportError
from .keys import load_spki_public_key

# JOSE curve name -> (cryptography curve class, coordinate size in bytes)
CURVES: Dict[str, tuple[type[ec.EllipticCurve], int]] = {
    "P-256": (ec.SECP256R1, 32),
    "P-384": (ec.SECP384R1, 48),
    "P-521": (ec.SECP521R1, 66),
}


def raw_to_der_signature(signature: bytes, size: int) -> bytes:
    """
    JWS carries ECDSA signatures as r || s, each left-padded to the curve
    size. The primitive wants DER.
    """
    if len(signature) != 2 * size:
        raise ValueError(f"expected {2 * size} byte signature, got {len(signature)}")
    r = int.from_bytes(signature[:size], "big")
    s = int.from_bytes(signature[size:], "big")
    return encode_dss_signature(r, s)


class EcdsaBackend(CryptoBackend):
    """
    ES256 / ES384 / ES512 on P-256 / P-384 / P-521.
    """

    family = "ES"

    def import_key(self, spec: AlgorithmSpec, key_material: str) -> ec.EllipticCurvePublicKey:
        key = load_spki_public_key(key_material)
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise KeyImportError(f"{spec.name} requires an EC public key")

        curve_cls, _ = CURVES[spec.curve]
        if not isinstance(key.curve, curve_cls):
            raise KeyImportError(
                f"{spec.name} requires a {spec.curve} key, got curve {key.curve.name}"
            )
        return key

    def verify(
        self,
        spec: AlgorithmSpec,
        key: ec.EllipticCurvePublicKey,
        data: bytes,
        signature: bytes,
    ) -> bool:
        _, size = CURVES[spec.curve]
        try:
            der = raw_to_der_signature(signature, size)
        except ValueError:
            # wrong length can never match
            return False

        try:
            key.verify(der, data, ec.ECDSA(spec.hash()))
            return True
        except InvalidSignature:
            return False
