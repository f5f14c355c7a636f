"""
Unit tests for the message selection of the error translation layer.
"""
import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from mesto.api.error_handlers import (
    BODY_NOT_OBJECT_MESSAGE,
    BODY_REQUIRED_MESSAGE,
    GENERIC_CAST_MESSAGE,
    GENERIC_VALIDATION_MESSAGE,
    INVALID_JSON_MESSAGE,
    document_validation_message,
    invalid_id_message,
    request_validation_message,
)
from mesto.domain.exceptions import DocumentValidationError


def _request(method: str, path: str) -> Request:
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "headers": [],
        "query_string": b"",
    })


class TestDocumentValidationMessage:
    @pytest.mark.parametrize("method, path, expected", [
        ("PATCH", "/users/me", "Переданы некорректные данные при обновлении профиля"),
        ("PATCH", "/users/me/avatar", "Переданы некорректные данные при обновлении аватара"),
        ("POST", "/cards", "Переданы некорректные данные при создании карточки"),
        ("GET", "/cards", GENERIC_VALIDATION_MESSAGE),
    ])
    def test_message_by_route(self, method, path, expected):
        exc = DocumentValidationError({"name": "Минимальная длина - 2 символа"})
        assert document_validation_message(_request(method, path), exc) == expected

    def test_signup_lists_every_field(self):
        exc = DocumentValidationError({
            "name": "Минимальная длина - 2 символа",
            "avatar": "Некорректный URL. Пример: https://example.com/avatar.jpg",
        })
        message = document_validation_message(_request("POST", "/signup"), exc)
        assert message == (
            "Ошибка валидации: Минимальная длина - 2 символа, "
            "Некорректный URL. Пример: https://example.com/avatar.jpg"
        )


class TestInvalidIdMessage:
    @pytest.mark.parametrize("method, path, expected", [
        ("DELETE", "/cards/abc", "Передан некорректный _id карточки"),
        ("PUT", "/cards/abc/likes", "Переданы некорректные данные для постановки лайка"),
        ("DELETE", "/cards/abc/likes", "Переданы некорректные данные для снятия лайка"),
        ("GET", "/users/abc", "Передан некорректный _id пользователя"),
        ("POST", "/cards", GENERIC_CAST_MESSAGE),
    ])
    def test_message_by_route(self, method, path, expected):
        assert invalid_id_message(_request(method, path)) == expected


class TestRequestValidationMessage:
    def test_missing_field(self):
        exc = RequestValidationError([{"type": "missing", "loc": ("body", "email"), "msg": "Field required"}])
        assert request_validation_message(exc) == "Поле email обязательно для заполнения"

    def test_extra_field(self):
        exc = RequestValidationError([{"type": "extra_forbidden", "loc": ("body", "role"), "msg": "Extra"}])
        assert request_validation_message(exc) == "Поле role не разрешено"

    def test_wrong_type(self):
        exc = RequestValidationError([{"type": "string_type", "loc": ("body", "name"), "msg": "str"}])
        assert request_validation_message(exc) == "Поле name должно быть строкой"

    def test_field_rule_message_passes_through(self):
        exc = RequestValidationError([
            {"type": "field_rule", "loc": ("body", "name"), "msg": "Максимальная длина - 30 символов"}
        ])
        assert request_validation_message(exc) == "Максимальная длина - 30 символов"

    def test_body_problems(self):
        assert request_validation_message(
            RequestValidationError([{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON"}])
        ) == INVALID_JSON_MESSAGE
        assert request_validation_message(
            RequestValidationError([{"type": "missing", "loc": ("body",), "msg": "Field required"}])
        ) == BODY_REQUIRED_MESSAGE
        assert request_validation_message(
            RequestValidationError([{"type": "model_attributes_type", "loc": ("body",), "msg": "dict"}])
        ) == BODY_NOT_OBJECT_MESSAGE

    def test_no_errors(self):
        assert request_validation_message(RequestValidationError([])) == GENERIC_VALIDATION_MESSAGE
