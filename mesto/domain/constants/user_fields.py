"""Document keys of the ``users`` collection"""


class UserFields:
    """Keys of a stored user; the password key holds the bcrypt hash"""
    ID = "id"
    EMAIL = "email"
    PASSWORD = "password"
    NAME = "name"
    ABOUT = "about"
    AVATAR = "avatar"
    CREATED_AT = "createdAt"

    MONGO_ID = "_id"
