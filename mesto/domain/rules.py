"""
Field format rules shared by the request gate and the storage layer.

Each ``*_error`` helper returns a Russian message describing what is wrong
with the value, or ``None`` when the value is acceptable.
"""
import re
from typing import Optional

from email_validator import EmailNotValidError, validate_email

URL_REGEX = re.compile(
    r"^(https?://)(www\.)?([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}"
    r"(/[a-zA-Z0-9\-._~:/?#\[\]@!$&'()*+,;=]*)?(#)?$"
)
NAME_REGEX = re.compile(r"^[a-zA-Zа-яА-ЯёЁ\s-]+$")
PASSWORD_REGEX = re.compile(r"^(?=.*\d)(?=.*[a-z])(?=.*[A-Z])")
HEX_REGEX = re.compile(r"^[0-9a-fA-F]*$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 8
OBJECT_ID_LENGTH = 24

REQUIRED_MESSAGE = "Поле обязательно для заполнения"


def name_error(value: Optional[str]) -> Optional[str]:
    """Validate a name-like field (user name, about, card name)"""
    if not value:
        return REQUIRED_MESSAGE
    if len(value) < NAME_MIN_LENGTH:
        return f"Минимальная длина - {NAME_MIN_LENGTH} символа"
    if len(value) > NAME_MAX_LENGTH:
        return f"Максимальная длина - {NAME_MAX_LENGTH} символов"
    if not NAME_REGEX.fullmatch(value):
        return "Допустимы только буквы, пробелы и дефисы"
    return None


def url_error(value: Optional[str]) -> Optional[str]:
    if not value:
        return REQUIRED_MESSAGE
    if not URL_REGEX.fullmatch(value):
        return "Некорректный URL. Пример: https://example.com/avatar.jpg"
    return None


def email_error(value: Optional[str]) -> Optional[str]:
    if not value:
        return "Email обязателен для заполнения"
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "Введите корректный email"
    return None


def password_error(value: Optional[str]) -> Optional[str]:
    if not value:
        return "Пароль обязателен для заполнения"
    if len(value) < PASSWORD_MIN_LENGTH:
        return f"Пароль должен содержать минимум {PASSWORD_MIN_LENGTH} символов"
    if not PASSWORD_REGEX.match(value):
        return "Пароль должен содержать цифры, строчные и заглавные буквы"
    return None

