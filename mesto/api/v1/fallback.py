"""Authenticated catch-all for paths under a protected prefix"""
# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...core.exceptions import ApiError, ErrorKind
from ..error_handlers import RESOURCE_NOT_FOUND_MESSAGE
from .dependencies import Identity, get_current_identity

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def _unmatched(identity: Identity = Depends(get_current_identity)) -> None:
    raise ApiError(ErrorKind.NOT_FOUND, RESOURCE_NOT_FOUND_MESSAGE)


def add_authenticated_fallback(router: APIRouter) -> None:
    """
    Answer every request the router's own routes do not take.

    Must be called after the last real route is registered. The caller
    is authenticated first, so an unknown path or method under the
    prefix is 401 without a token and 404 with one.
    """
    for path in ("", "/{path:path}"):
        router.add_api_route(path, _unmatched, methods=ALL_METHODS, include_in_schema=False)
