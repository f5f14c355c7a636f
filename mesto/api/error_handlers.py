"""
Translation of failures into client responses.

Storage failures carry no knowledge of which endpoint triggered them, so
the message for a ``DocumentValidationError`` or an ``InvalidIdError`` is
picked from the request method and path. Everything the handlers do not
recognise becomes a 500 with a fixed message; the original exception is
only logged.
"""
# Standard library imports
import logging
import re
from typing import Optional, Pattern, Sequence, Tuple

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..core.exceptions import ApiError, ErrorKind
from ..core.logging_config import ERROR_LOGGER_NAME
from ..domain.exceptions import DocumentValidationError, DuplicateEmailError, InvalidIdError
from ..application.use_cases.auth.register_user import EMAIL_TAKEN_MESSAGE

error_logger = logging.getLogger(ERROR_LOGGER_NAME)

RESOURCE_NOT_FOUND_MESSAGE = "Ресурс не найден"
INTERNAL_ERROR_MESSAGE = "На сервере произошла ошибка"
GENERIC_VALIDATION_MESSAGE = "Переданы некорректные данные"
GENERIC_CAST_MESSAGE = "Передан некорректный _id"
INVALID_JSON_MESSAGE = "Некорректный JSON в теле запроса"
BODY_REQUIRED_MESSAGE = "Тело запроса обязательно"
BODY_NOT_OBJECT_MESSAGE = "Тело запроса должно быть JSON-объектом"
SIGNUP_VALIDATION_PREFIX = "Ошибка валидации: "

# (method, path pattern, message)
Rule = Tuple[str, Pattern[str], str]

_SIGNUP_PATH = re.compile(r"^/signup/?$")

_VALIDATION_RULES: Sequence[Rule] = (
    ("PATCH", re.compile(r"^/users/me/?$"), "Переданы некорректные данные при обновлении профиля"),
    ("PATCH", re.compile(r"^/users/me/avatar/?$"), "Переданы некорректные данные при обновлении аватара"),
    ("POST", re.compile(r"^/cards/?$"), "Переданы некорректные данные при создании карточки"),
)

_CAST_RULES: Sequence[Rule] = (
    ("DELETE", re.compile(r"^/cards/[^/]+/?$"), "Передан некорректный _id карточки"),
    ("PUT", re.compile(r"^/cards/[^/]+/likes/?$"), "Переданы некорректные данные для постановки лайка"),
    ("DELETE", re.compile(r"^/cards/[^/]+/likes/?$"), "Переданы некорректные данные для снятия лайка"),
    ("GET", re.compile(r"^/users/[^/]+/?$"), "Передан некорректный _id пользователя"),
)


def _match_rule(request: Request, rules: Sequence[Rule]) -> Optional[str]:
    path = request.url.path
    for method, pattern, message in rules:
        if request.method == method and pattern.match(path):
            return message
    return None


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _log_client_error(request: Request, status_code: int, message: str) -> None:
    error_logger.warning(f"{request.method} {request.url.path} -> {status_code}: {message}")


def document_validation_message(request: Request, exc: DocumentValidationError) -> str:
    """Pick the client message for a storage validation failure"""
    if request.method == "POST" and _SIGNUP_PATH.match(request.url.path):
        return SIGNUP_VALIDATION_PREFIX + ", ".join(exc.errors.values())
    return _match_rule(request, _VALIDATION_RULES) or GENERIC_VALIDATION_MESSAGE


def invalid_id_message(request: Request) -> str:
    """Pick the client message for an ID that could not be cast"""
    return _match_rule(request, _CAST_RULES) or GENERIC_CAST_MESSAGE


def request_validation_message(exc: RequestValidationError) -> str:
    """Turn the first request-gate error into a Russian message"""
    errors = exc.errors()
    if not errors:
        return GENERIC_VALIDATION_MESSAGE

    error = errors[0]
    error_type = error.get("type", "")
    location = tuple(error.get("loc", ()))
    field = str(location[-1]) if location else ""

    if error_type == "json_invalid":
        return INVALID_JSON_MESSAGE
    if error_type == "missing" and location == ("body",):
        return BODY_REQUIRED_MESSAGE
    if error_type in ("model_attributes_type", "dict_type"):
        return BODY_NOT_OBJECT_MESSAGE
    if error_type == "missing":
        return f"Поле {field} обязательно для заполнения"
    if error_type == "extra_forbidden":
        return f"Поле {field} не разрешено"
    if error_type == "string_type":
        return f"Поле {field} должно быть строкой"
    return str(error.get("msg") or GENERIC_VALIDATION_MESSAGE)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.kind is ErrorKind.INTERNAL_SERVER_ERROR:
        error_logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        _log_client_error(request, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = request_validation_message(exc)
    _log_client_error(request, status.HTTP_400_BAD_REQUEST, message)
    return _message_response(status.HTTP_400_BAD_REQUEST, message)


async def document_validation_error_handler(request: Request, exc: DocumentValidationError) -> JSONResponse:
    message = document_validation_message(request, exc)
    _log_client_error(request, status.HTTP_400_BAD_REQUEST, f"{message} ({exc.summary})")
    return _message_response(status.HTTP_400_BAD_REQUEST, message)


async def invalid_id_error_handler(request: Request, exc: InvalidIdError) -> JSONResponse:
    message = invalid_id_message(request)
    _log_client_error(request, status.HTTP_400_BAD_REQUEST, message)
    return _message_response(status.HTTP_400_BAD_REQUEST, message)


async def duplicate_email_error_handler(request: Request, exc: DuplicateEmailError) -> JSONResponse:
    _log_client_error(request, status.HTTP_409_CONFLICT, str(exc))
    return _message_response(status.HTTP_409_CONFLICT, EMAIL_TAKEN_MESSAGE)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unknown methods on known paths both read as a missing resource
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _message_response(status.HTTP_404_NOT_FOUND, RESOURCE_NOT_FOUND_MESSAGE)
    return _message_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error_logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler of the translation layer on the app"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(DocumentValidationError, document_validation_error_handler)
    app.add_exception_handler(InvalidIdError, invalid_id_error_handler)
    app.add_exception_handler(DuplicateEmailError, duplicate_email_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
