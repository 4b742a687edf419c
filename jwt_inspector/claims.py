from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

TIMESTAMP_CLAIMS = {
    "iat": "Issued At",
    "exp": "Expires",
    "nbf": "Not Before",
}

JUST_NOW_SECONDS = 60


@dataclass(frozen=True)
class TimestampClaim:
    claim: str
    label: str
    value: float
    at: datetime
    relative: str


def _numeric(value: Any) -> Optional[float]:
    # bool is an int subclass; true/false are not timestamps
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def format_relative(seconds: float) -> str:
    """
    Human-readable distance for a signed number of seconds
    (positive = future).
    """
    if abs(seconds) < JUST_NOW_SECONDS:
        return "just now"

    total = int(abs(seconds))
    minutes, hours, days = total // 60, total // 3600, total // 86400

    if days > 0:
        n, unit = days, "day"
    elif hours > 0:
        n, unit = hours, "hour"
    elif minutes > 0:
        n, unit = minutes, "minute"
    else:
        n, unit = total, "second"

    text = f"{n} {unit}{'s' if n > 1 else ''}"
    return f"in {text}" if seconds > 0 else f"{text} ago"


def describe_timestamps(payload: Dict[str, Any], now: Optional[datetime] = None) -> List[TimestampClaim]:
    """
    Interpret iat / exp / nbf as Unix timestamps, in that order.
    Missing, zero and non-numeric values are skipped.
    """
    current = _now(now)
    out: List[TimestampClaim] = []

    for claim, label in TIMESTAMP_CLAIMS.items():
        value = _numeric(payload.get(claim))
        if not value:
            continue
        try:
            at = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            continue
        out.append(
            TimestampClaim(
                claim=claim,
                label=label,
                value=value,
                at=at,
                relative=format_relative((at - current).total_seconds()),
            )
        )
    return out


def is_expired(payload: Dict[str, Any], now: Optional[datetime] = None, leeway: int = 0) -> bool:
    exp = _numeric(payload.get("exp"))
    if exp is None:
        return False
    return _now(now).timestamp() >= exp + leeway


def is_not_yet_valid(payload: Dict[str, Any], now: Optional[datetime] = None, leeway: int = 0) -> bool:
    nbf = _numeric(payload.get("nbf"))
    if nbf is None:
        return False
    return _now(now).timestamp() < nbf - leeway
