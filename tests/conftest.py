import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

# Well-known HS256 example token and its secret
SAMPLE_JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)
SAMPLE_SECRET = "your-256-bit-secret"

LONG_SECRET = "k" * 64

CLAIMS = {"sub": "user-42", "name": "Jane Roe", "iat": 1516239022, "exp": 1516242622}


def public_pem(private_key) -> str:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_public_pem(rsa_private_key):
    return public_pem(rsa_private_key)


@pytest.fixture(scope="session")
def ec_keys():
    """
    One private key per JOSE curve name.
    """
    return {
        "P-256": ec.generate_private_key(ec.SECP256R1()),
        "P-384": ec.generate_private_key(ec.SECP384R1()),
        "P-521": ec.generate_private_key(ec.SECP521R1()),
    }


@pytest.fixture
def sign():
    def _sign(key, alg: str, claims=None) -> str:
        return jwt.encode(claims or CLAIMS, key, algorithm=alg)

    return _sign
