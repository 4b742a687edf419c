import base64
import binascii
import json
from typing import Any, Dict

from .errors import InvalidEncoding, InvalidJSON, MalformedStructure
from .models import Token


def b64url_encode(data: bytes) -> str:
    """
    Base64url encode without padding, as required by JOSE / JWT.
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str) -> bytes:
    """
    Base64url decode, adding back any missing padding.

    '-' and '_' are mapped onto the standard alphabet before a strict
    decode, so anything outside the base64 alphabet raises ValueError.
    """
    normalized = data.replace("-", "+").replace("_", "/")
    padded = normalized + "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(padded.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("invalid base64url") from exc


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"{name} is not a valid JSON value")


def decode_segment(segment: str, name: str) -> Dict[str, Any]:
    """
    Decode a base64url-encoded JSON segment (header or payload).
    Raises InvalidEncoding / InvalidJSON naming the segment.
    """
    try:
        raw = b64url_decode(segment)
    except ValueError:
        raise InvalidEncoding(name) from None

    try:
        value = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError:
        raise InvalidJSON(name, "not UTF-8 text") from None
    except json.JSONDecodeError as exc:
        raise InvalidJSON(name, exc.msg) from None
    except RecursionError:
        raise InvalidJSON(name, "nesting too deep") from None
    except ValueError as exc:
        raise InvalidJSON(name, str(exc)) from None

    if not isinstance(value, dict):
        raise InvalidJSON(name, "top-level value is not an object")
    return value


def split_jws(token: str) -> tuple[str, str, str]:
    """
    Split a compact JWS into 3 segments.
    Raises MalformedStructure if the structure is wrong.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedStructure(len(parts))
    return parts[0], parts[1], parts[2]


def parse(raw: str) -> Token:
    """
    Parse a compact JWS string into a Token. All-or-nothing: any failure
    raises a TokenParseError subclass and no partial Token is produced.
    """
    h_seg, p_seg, s_seg = split_jws(raw)

    header = decode_segment(h_seg, "header")
    payload = decode_segment(p_seg, "payload")

    # signatures are opaque bytes; an empty segment decodes to b""
    try:
        signature = b64url_decode(s_seg)
    except ValueError:
        raise InvalidEncoding("signature") from None

    return Token(
        raw_header=h_seg,
        raw_payload=p_seg,
        raw_signature=s_seg,
        header=header,
        payload=payload,
        signature=signature,
    )
