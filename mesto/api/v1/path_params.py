"""Path parameter gates for 24-hex identifiers"""
# External package imports
from fastapi import Path

# Local application imports
from ...core.exceptions import ApiError, ErrorKind
from ...domain.rules import HEX_REGEX, OBJECT_ID_LENGTH


def _check_object_id(value: str, not_hex_message: str, bad_length_message: str) -> str:
    if not HEX_REGEX.fullmatch(value):
        raise ApiError(ErrorKind.BAD_REQUEST, not_hex_message)
    if len(value) != OBJECT_ID_LENGTH:
        raise ApiError(ErrorKind.BAD_REQUEST, bad_length_message)
    return value


async def user_id_path(user_id: str = Path()) -> str:
    return _check_object_id(
        user_id,
        "Невалидный идентификатор",
        "Идентификатор должен содержать 24 символа",
    )


async def card_id_path(card_id: str = Path()) -> str:
    return _check_object_id(
        card_id,
        "Невалидный идентификатор карточки",
        "Идентификатор карточки должен содержать 24 символа",
    )
