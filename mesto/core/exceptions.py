"""
Client-facing error vocabulary.

Every failure that reaches the client is described by an ``ErrorKind`` and a
Russian message. The HTTP status is derived from the kind in one place
(``ErrorKind.status_code``) so handlers never pick status codes themselves.
"""
# Standard library imports
from enum import Enum

# External package imports
from fastapi import status


class ErrorKind(str, Enum):
    """Kinds of failures the API reports"""
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL_SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ApiError(Exception):
    """Failure with a known kind and a message safe to show to the client"""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_dict(self) -> dict:
        return {"message": self.message}

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.value}, message={self.message!r})"


class InvalidCredentials(Exception):
    """Raised when a session token is missing, malformed, expired or forged"""
