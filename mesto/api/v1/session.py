# External package imports
from fastapi import Response

# Local application imports
from ...core.config import get_settings


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token as an HTTP-only, same-site strict cookie"""
    settings = get_settings()
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        samesite="strict",
        secure=settings.is_production,
        path="/",
    )
