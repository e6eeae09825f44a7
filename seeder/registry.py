# seeder/registry.py

__all__ = [
    "COLLECTIONS",
    "DEFAULT_ITEMS",
    "FORMAT_COLLECTIONS",
    "UnknownCollectionError",
    "resolve_collection",
]

# item name (as given on the command line / fixture file stem) -> collection name
COLLECTIONS = {
    "communities": "communities",
    "users": "users",
    "organizations": "organizations",
    "actionItemCategories": "actionitemcategories",
    "events": "events",
    "posts": "posts",
    "appUserProfiles": "appuserprofiles",
}

DEFAULT_ITEMS = [
    "users",
    "organizations",
    "posts",
    "events",
    "appUserProfiles",
]

FORMAT_COLLECTIONS = list(COLLECTIONS.values())


class UnknownCollectionError(KeyError):
    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Invalid collection name: {self.name}"


def resolve_collection(db, name):
    """Map an item name to its pymongo collection. Raises UnknownCollectionError."""
    try:
        return db[COLLECTIONS[name]]
    except KeyError:
        raise UnknownCollectionError(name) from None
