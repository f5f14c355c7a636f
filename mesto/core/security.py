"""
Password hashing and session tokens.

A session token is an HS256 JWT whose ``_id`` claim holds the user id.
It lives for ``Settings.session_max_age_seconds``, the same lifetime as
the cookie that carries it.
"""
# Standard library imports
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import InvalidCredentials

PASSWORD_HASH_ROUNDS = 10

# Claim carrying the user id inside the session token
IDENTITY_CLAIM = "_id"


def hash_password(plain_password: str) -> str:
    """Return a salted bcrypt hash of the password as text"""
    salt = bcrypt.gensalt(rounds=PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a password against a stored bcrypt hash

    A stored value that is not a bcrypt hash never matches.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_jwt_token(claims: Dict[str, Any]) -> str:
    """
    Sign ``claims`` into a JWT valid for one session lifetime

    Args:
        claims: Application claims; ``iat`` and ``exp`` are added here

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    now = datetime.now(timezone.utc).replace(microsecond=0)
    lifetime = timedelta(seconds=settings.session_max_age_seconds)

    return jwt.encode(
        {**claims, "iat": now, "exp": now + lifetime},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of a JWT and return its claims

    Raises:
        InvalidCredentials: If the token is malformed, forged or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise InvalidCredentials(f"Invalid token: {e}") from e


def issue_token(identity_id: str) -> str:
    return create_jwt_token({IDENTITY_CLAIM: identity_id})


def verify_token(token: Optional[str]) -> str:
    """
    Resolve a session token into the user id it was issued for

    Raises:
        InvalidCredentials: If the token is absent or does not verify,
            or if it carries no user id
    """
    if not token:
        raise InvalidCredentials("Token is missing")

    identity_id = decode_jwt_token(token).get(IDENTITY_CLAIM)
    if not isinstance(identity_id, str) or not identity_id:
        raise InvalidCredentials("Invalid authentication payload: missing user ID")
    return identity_id
