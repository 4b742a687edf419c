import pytest
from cryptography.hazmat.primitives import hashes

from jwt_inspector import VerificationStatus, parse, verify, verify_sync, verify_token
from jwt_inspector.crypto_backend import SUPPORTED_ALGORITHMS, hash_for
from jwt_inspector.crypto_ecdsa import raw_to_der_signature
from jwt_inspector.jose_utils import b64url_encode

from conftest import LONG_SECRET, SAMPLE_JWT, SAMPLE_SECRET, public_pem

CORRUPTED_PEM = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEA!!not*base64!!
-----END PUBLIC KEY-----"""

TRUNCATED_PEM = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEA
-----END PUBLIC KEY-----"""


TAMPERED_PAYLOAD = b64url_encode(b'{"sub":"admin"}')


def _tamper_payload(raw: str) -> str:
    h_seg, _, s_seg = raw.split(".")
    return f"{h_seg}.{TAMPERED_PAYLOAD}.{s_seg}"


def test_sample_token_verifies_with_its_secret():
    result = verify_sync(parse(SAMPLE_JWT), SAMPLE_SECRET, "HS256")

    assert result.status is VerificationStatus.VERIFIED
    assert result.ok
    assert result.reason == ""


def test_wrong_secret_is_invalid():
    result = verify_sync(parse(SAMPLE_JWT), "wrong-secret", "HS256")

    assert result.status is VerificationStatus.INVALID
    assert not result.ok


def test_hmac_with_wrong_hash_is_invalid():
    result = verify_sync(parse(SAMPLE_JWT), SAMPLE_SECRET, "HS384")
    assert result.status is VerificationStatus.INVALID


def test_mismatched_family_is_never_verified():
    result = verify_sync(parse(SAMPLE_JWT), SAMPLE_SECRET, "RS256")
    assert result.status in (VerificationStatus.ERROR, VerificationStatus.INVALID)


@pytest.mark.parametrize("alg", ["HS999", "none", "PS256", "EdDSA", "hs256", ""])
def test_unsupported_algorithm(alg):
    result = verify_sync(parse(SAMPLE_JWT), SAMPLE_SECRET, alg)

    assert result.status is VerificationStatus.ERROR
    assert result.reason == "Unsupported algorithm"


@pytest.mark.parametrize("pem", [CORRUPTED_PEM, TRUNCATED_PEM, "", "-----BEGIN PUBLIC KEY-----\n-----END PUBLIC KEY-----"])
def test_bad_pem_is_an_error_not_a_crash(pem):
    result = verify_sync(parse(SAMPLE_JWT), pem, "RS256")

    assert result.status is VerificationStatus.ERROR
    assert result.reason.startswith("Key import failed")


def test_empty_signature_is_invalid():
    h_seg, p_seg, _ = SAMPLE_JWT.split(".")
    result = verify_sync(parse(f"{h_seg}.{p_seg}."), SAMPLE_SECRET, "HS256")
    assert result.status is VerificationStatus.INVALID


@pytest.mark.parametrize("alg", ["HS256", "HS384", "HS512"])
def test_hmac_family(sign, alg):
    raw = sign(LONG_SECRET, alg)

    assert verify_sync(parse(raw), LONG_SECRET, alg).ok
    assert verify_sync(parse(_tamper_payload(raw)), LONG_SECRET, alg).status is VerificationStatus.INVALID


@pytest.mark.parametrize("alg", ["RS256", "RS384", "RS512"])
def test_rsa_family(sign, rsa_private_key, rsa_public_pem, alg):
    raw = sign(rsa_private_key, alg)

    assert verify_sync(parse(raw), rsa_public_pem, alg).ok
    assert verify_sync(parse(_tamper_payload(raw)), rsa_public_pem, alg).status is VerificationStatus.INVALID


def test_rsa_wrong_hash_is_invalid(sign, rsa_private_key, rsa_public_pem):
    raw = sign(rsa_private_key, "RS256")
    assert verify_sync(parse(raw), rsa_public_pem, "RS512").status is VerificationStatus.INVALID


@pytest.mark.parametrize("alg,curve", [("ES256", "P-256"), ("ES384", "P-384"), ("ES512", "P-521")])
def test_ecdsa_family(sign, ec_keys, alg, curve):
    key = ec_keys[curve]
    raw = sign(key, alg)
    pem = public_pem(key)

    assert verify_sync(parse(raw), pem, alg).ok
    assert verify_sync(parse(_tamper_payload(raw)), pem, alg).status is VerificationStatus.INVALID


def test_ecdsa_curve_mismatch_is_key_error(sign, ec_keys):
    raw = sign(ec_keys["P-384"], "ES384")
    result = verify_sync(parse(raw), public_pem(ec_keys["P-256"]), "ES384")

    assert result.status is VerificationStatus.ERROR
    assert "P-384" in result.reason


def test_ecdsa_with_rsa_key_is_key_error(sign, ec_keys, rsa_public_pem):
    raw = sign(ec_keys["P-256"], "ES256")
    result = verify_sync(parse(raw), rsa_public_pem, "ES256")

    assert result.status is VerificationStatus.ERROR
    assert "EC public key" in result.reason


def test_rsa_with_ec_key_is_key_error(sign, rsa_private_key, ec_keys):
    raw = sign(rsa_private_key, "RS256")
    result = verify_sync(parse(raw), public_pem(ec_keys["P-256"]), "RS256")

    assert result.status is VerificationStatus.ERROR
    assert "RSA public key" in result.reason


def test_ecdsa_signature_of_wrong_length_is_invalid(sign, ec_keys):
    raw = sign(ec_keys["P-256"], "ES256")
    h_seg, p_seg, s_seg = raw.split(".")
    short = f"{h_seg}.{p_seg}.{b64url_encode(b'x' * 63)}"

    assert verify_sync(parse(short), public_pem(ec_keys["P-256"]), "ES256").status is VerificationStatus.INVALID


def test_raw_to_der_signature_rejects_bad_length():
    with pytest.raises(ValueError):
        raw_to_der_signature(b"\x01" * 10, 32)


def test_hash_for_falls_back_to_sha256():
    assert isinstance(hash_for("HS384"), hashes.SHA384)
    assert isinstance(hash_for("ES512"), hashes.SHA512)
    assert isinstance(hash_for("XX999"), hashes.SHA256)


def test_supported_algorithm_table():
    assert sorted(SUPPORTED_ALGORITHMS) == [
        "ES256", "ES384", "ES512",
        "HS256", "HS384", "HS512",
        "RS256", "RS384", "RS512",
    ]
    assert SUPPORTED_ALGORITHMS["ES512"].curve == "P-521"
    assert SUPPORTED_ALGORITHMS["HS256"].curve is None
    assert SUPPORTED_ALGORITHMS["RS384"].hash_name == "SHA-384"


@pytest.mark.asyncio
async def test_verify_is_awaitable():
    result = await verify(parse(SAMPLE_JWT), SAMPLE_SECRET, "HS256")
    assert result.status is VerificationStatus.VERIFIED


@pytest.mark.asyncio
async def test_verify_token_uses_header_alg():
    assert (await verify_token(SAMPLE_JWT, SAMPLE_SECRET)).ok
    assert (await verify_token(SAMPLE_JWT, SAMPLE_SECRET, "HS512")).status is VerificationStatus.INVALID


@pytest.mark.asyncio
async def test_verify_token_reports_parse_errors():
    result = await verify_token("not-a-token", SAMPLE_SECRET)

    assert result.status is VerificationStatus.ERROR
    assert result.reason.startswith("Invalid JWT")
