"""Document keys of the ``cards`` collection"""


class CardFields:
    """Keys of a stored card; owner and likes hold user ObjectIds"""
    ID = "id"
    NAME = "name"
    LINK = "link"
    OWNER = "owner"
    LIKES = "likes"
    CREATED_AT = "createdAt"

    MONGO_ID = "_id"
