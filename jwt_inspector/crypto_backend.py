from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from cryptography.hazmat.primitives import hashes

from .errors import UnsupportedAlgorithm

# We support these algorithm names in the verifier
AlgName = Literal[
    "HS256", "HS384", "HS512",
    "RS256", "RS384", "RS512",
    "ES256", "ES384", "ES512",
]

Family = Literal["HS", "RS", "ES"]

_HASHES: Dict[str, type[hashes.HashAlgorithm]] = {
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
}

# ES512 is P-521, not P-512
_CURVES: Dict[str, str] = {
    "ES256": "P-256",
    "ES384": "P-384",
    "ES512": "P-521",
}


@dataclass(frozen=True)
class AlgorithmSpec:
    """
    Everything the verifier needs to know about one JWS algorithm.
    """
    name: str
    family: Family
    hash_name: str
    curve: Optional[str] = None

    def hash(self) -> hashes.HashAlgorithm:
        return _HASHES[self.hash_name]()


SUPPORTED_ALGORITHMS: Dict[str, AlgorithmSpec] = {
    f"{family}{bits}": AlgorithmSpec(
        name=f"{family}{bits}",
        family=family,
        hash_name=f"SHA-{bits}",
        curve=_CURVES.get(f"{family}{bits}"),
    )
    for family in ("HS", "RS", "ES")
    for bits in ("256", "384", "512")
}


def hash_for(alg: str) -> hashes.HashAlgorithm:
    """
    Hash selected by the numeric suffix; anything unrecognised falls back to
    SHA-256. This does not make the algorithm supported.
    """
    spec = SUPPORTED_ALGORITHMS.get(alg)
    if spec is None:
        return hashes.SHA256()
    return spec.hash()


def resolve_algorithm(alg: str) -> AlgorithmSpec:
    spec = SUPPORTED_ALGORITHMS.get(alg)
    if spec is None:
        raise UnsupportedAlgorithm(alg)
    return spec


class CryptoBackend(ABC):
    """
    Abstract base class for one signature family (HMAC, RSA, ECDSA).
    """

    family: Family

    @abstractmethod
    def import_key(self, spec: AlgorithmSpec, key_material: str) -> Any:
        """
        Turn the caller's key material into something verify() accepts.
        Raises KeyImportError when the material does not fit the algorithm.
        """
        raise NotImplementedError

    @abstractmethod
    def verify(self, spec: AlgorithmSpec, key: Any, data: bytes, signature: bytes) -> bool:
        """
        Verify the signature for the given data and imported key.
        Returns False on mismatch; anything raised is a crypto failure.
        """
        raise NotImplementedError
