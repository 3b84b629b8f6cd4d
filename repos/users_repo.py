"""Repository for User store operations."""

from uuid import UUID, uuid4

from db import MemoryStore
from models.user import User, UserCreate


async def get_by_id(store: MemoryStore, *, user_id: UUID) -> User | None:
    return store.users.get(user_id)


async def get_by_username(store: MemoryStore, *, username: str) -> User | None:
    return next(
        (user for user in store.users.values() if user.username == username),
        None,
    )


async def create(store: MemoryStore, payload: UserCreate) -> User:
    """
    Create a new user with a fresh id.

    Args:
        store: Backing store
        payload: Username and password

    Returns:
        Created user
    """
    user = User(id=uuid4(), username=payload.username, password=payload.password)
    store.users[user.id] = user
    return user
