# Standard library imports
import logging
from typing import Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields
from ...domain.exceptions import InvalidIdError

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
CARDS_COLLECTION = "cards"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the shared client; the next get_database() call reconnects"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_card_collection() -> AsyncIOMotorCollection:
    """
    Get cards collection from MongoDB

    Returns:
        MongoDB collection for cards
    """
    return get_database()[CARDS_COLLECTION]


async def ensure_indexes() -> None:
    """Create the unique email index the user repository relies on"""
    await get_user_collection().create_index(
        [(UserFields.EMAIL, ASCENDING)],
        unique=True,
        name="email_unique",
    )
    logger.info("MongoDB indexes ensured")


def to_object_id(value: str) -> ObjectId:
    """
    Cast a string ID to ObjectId

    Raises:
        InvalidIdError: If the value is not a valid ObjectId
    """
    # ObjectId(None) would silently generate a fresh id
    if not isinstance(value, str):
        raise InvalidIdError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdError(value) from e
