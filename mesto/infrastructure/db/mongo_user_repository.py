# Standard library imports
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, validate_user_fields
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateEmailError
from .mongo_connection import get_user_collection, to_object_id

# Fields a partial update may touch; email, password and createdAt are fixed
_UPDATABLE_FIELDS = (UserFields.NAME, UserFields.ABOUT, UserFields.AVATAR)


class MongoUserRepository(UserRepository):
    """
    Users stored in the ``users`` collection.

    Ids travel as 24-hex strings and are cast to ObjectId here; a value that
    does not cast raises ``InvalidIdError``. Driver failures other than the
    unique email violation surface as ``RuntimeError``.
    """

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_all(self) -> List[User]:
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise RuntimeError(f"Error listing users: {e}") from e
        return [self._to_user(document) for document in documents]

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email})

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self._find_one({UserFields.MONGO_ID: to_object_id(user_id)})

    async def create(self, user: User) -> User:
        """
        Insert a user and read the stored document back

        Raises:
            DuplicateEmailError: If the unique email index rejects the insert
        """
        if user.id:
            raise ValueError(f"User {user.id} is already stored")

        document = self._to_document(user)
        document[UserFields.CREATED_AT] = user.created_at or datetime.now(timezone.utc)

        try:
            result = await self.user_collection.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(user.email) from e
        except PyMongoError as e:
            raise RuntimeError(f"Error inserting user: {e}") from e

        stored = await self._find_one({UserFields.MONGO_ID: result.inserted_id})
        if stored is None:
            raise RuntimeError(f"User {result.inserted_id} vanished right after insert")
        return stored

    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """
        Apply a partial profile update and return the user as stored after it

        Args:
            user_id: ID of the user to update
            fields: Any of name, about and avatar

        Returns:
            Updated User, or None if no user has that ID

        Raises:
            DocumentValidationError: If a value breaks the user field rules
            InvalidIdError: If user_id is not a valid ObjectId
        """
        fixed = sorted(set(fields) - set(_UPDATABLE_FIELDS))
        if fixed:
            raise ValueError(f"Fields cannot be updated: {', '.join(fixed)}")

        validate_user_fields(fields)
        query = {UserFields.MONGO_ID: to_object_id(user_id)}

        try:
            document = await self.user_collection.find_one_and_update(
                query,
                {"$set": dict(fields)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error updating user {user_id}: {e}") from e
        return None if document is None else self._to_user(document)

    async def _find_one(self, query: Dict[str, Any]) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise RuntimeError(f"Error reading user: {e}") from e
        return None if document is None else self._to_user(document)

    @staticmethod
    def _to_user(document: dict) -> User:
        if UserFields.MONGO_ID not in document:
            raise ValueError("User document has no _id")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            name=document.get(UserFields.NAME, ""),
            about=document.get(UserFields.ABOUT, ""),
            avatar=document.get(UserFields.AVATAR, ""),
            created_at=document.get(UserFields.CREATED_AT),
        )

    @staticmethod
    def _to_document(user: User) -> dict:
        """Stored shape of a user, without _id and createdAt"""
        return {
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.NAME: user.name,
            UserFields.ABOUT: user.about,
            UserFields.AVATAR: user.avatar,
        }
