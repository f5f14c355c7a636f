"""Failures raised by the storage layer and the domain models"""
from typing import Dict


class DocumentValidationError(ValueError):
    """A document (or a partial update) violates the field rules"""

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(self.summary)

    @property
    def summary(self) -> str:
        return ", ".join(
            f"{field}: {message}" for field, message in self.errors.items()
        )


class InvalidIdError(ValueError):
    """An identifier could not be cast to a storage id"""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Cast to ObjectId failed for value {value!r}")


class DuplicateEmailError(Exception):
    """The unique email constraint rejected an insert"""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email {email} already exists")
