"""
Explicit JSON representations of resources.

Each resource lists exactly the attributes it emits.
"""
from typing import Iterable

from .models import User

USER_TYPE = "users"
USER_ATTRIBUTES = ("name", "email")


def serialize_user(user: User) -> dict:
    return {
        "id": str(user.id),
        "type": USER_TYPE,
        "attributes": {name: getattr(user, name) for name in USER_ATTRIBUTES},
    }


def user_document(user: User) -> dict:
    return {"data": serialize_user(user)}


def user_collection_document(users: Iterable[User]) -> dict:
    return {"data": [serialize_user(user) for user in users]}
