"""Security — bcrypt password checks and signed bearer tokens (PyJWT).

Invariants:
    - Passwords are only ever compared against bcrypt hashes (constant-time in bcrypt)
    - Tokens carry {username, name, iat, exp}; exp is always set
    - decode_token() raises InvalidTokenError for every signature/expiry/format failure

Design Decisions:
    - Expiry strings follow the "30m" / "12h" / "7d" convention already used in
      deployment env files; a bare number means seconds
"""

import re
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from freight_ledger.core.errors import InvalidTokenError

_DURATION = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h|d|w|y)?\s*$", re.IGNORECASE)
_UNIT_SECONDS = {
    "ms": 0.001, "s": 1, "m": 60, "h": 3600,
    "d": 86400, "w": 604800, "y": 31_557_600,
}


def parse_duration(value: str | int) -> timedelta:
    """'30m' → 30 minutes. Raises ValueError on unknown formats."""
    if isinstance(value, int):
        return timedelta(seconds=value)
    match = _DURATION.match(value)
    if not match:
        raise ValueError(f"Unrecognised duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=float(amount) * _UNIT_SECONDS[(unit or "s").lower()])


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def issue_token(
    claims: dict, secret: str, expires_in: str, algorithm: str = "HS256",
    now: datetime | None = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        **claims,
        "iat": issued_at,
        "exp": issued_at + parse_duration(expires_in),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> dict:
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.PyJWTError:
        raise InvalidTokenError()
