from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Storage contract for user records"""

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID; raises InvalidIdError for a malformed ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; raises DuplicateEmailError if the email is taken"""
        pass

    @abstractmethod
    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Validate and apply a partial update; None if the user does not exist"""
        pass
