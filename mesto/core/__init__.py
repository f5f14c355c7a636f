from .config import Settings, get_settings
from .exceptions import ApiError, ErrorKind, InvalidCredentials
from .security import (
    hash_password,
    verify_password,
    issue_token,
    verify_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "ApiError",
    "ErrorKind",
    "InvalidCredentials",
    "hash_password",
    "verify_password",
    "issue_token",
    "verify_token",
]
