# Standard library imports
import logging
from dataclasses import dataclass
from typing import Optional

# External package imports
from fastapi import Header, Request

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import ApiError, ErrorKind, InvalidCredentials
from ...core.security import verify_token

logger = logging.getLogger(__name__)

AUTH_REQUIRED_MESSAGE = "Необходима авторизация"
INVALID_TOKEN_MESSAGE = "Недействительный токен авторизации"


def _header_token(authorization: Optional[str]) -> Optional[str]:
    parts = authorization.split(" ") if authorization else []
    return parts[1] if len(parts) > 1 else None


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, resolved from the session token"""
    user_id: str


async def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> Identity:
    """
    FastAPI dependency resolving the session token into an Identity

    The cookie wins over the Authorization header when both are sent. The
    header token is its second space-separated word whatever the scheme,
    so "Token abc" is checked (and rejected) like any other token.

    Raises:
        ApiError: UNAUTHORIZED if no token is present or it does not verify
    """
    cookie_token = request.cookies.get(get_settings().auth_cookie_name)
    token = cookie_token or _header_token(authorization)
    if not token:
        raise ApiError(ErrorKind.UNAUTHORIZED, AUTH_REQUIRED_MESSAGE)

    try:
        user_id = verify_token(token)
    except InvalidCredentials as exception:
        logger.debug(f"Rejected session token: {exception}")
        raise ApiError(ErrorKind.UNAUTHORIZED, INVALID_TOKEN_MESSAGE)

    return Identity(user_id=user_id)
