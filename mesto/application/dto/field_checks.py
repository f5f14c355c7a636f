"""
Request-gate checks for pydantic validators.

Each check raises ``PydanticCustomError`` with a ready-to-show Russian
message, which the error translation layer passes to the client as is.
"""
# Standard library imports
from typing import Callable, Optional

# External package imports
from pydantic_core import PydanticCustomError

# Local application imports
from ...domain import rules

FIELD_RULE_ERROR = "field_rule"


def _raise_if(message: Optional[str]) -> None:
    if message:
        raise PydanticCustomError(FIELD_RULE_ERROR, message)


def _checked(rule: Callable[[Optional[str]], Optional[str]]) -> Callable[[str], str]:
    def check(value: str) -> str:
        _raise_if(rule(value))
        return value
    return check


check_name = _checked(rules.name_error)
check_url = _checked(rules.url_error)
check_password = _checked(rules.password_error)
check_email = _checked(rules.email_error)
