"""FastAPI dependencies."""

from fastapi import Request

from db import MemoryStore
from db import get_db as get_db_store


async def get_db(request: Request) -> MemoryStore:
    """
    Dependency to get the signup store.
    Reuses the get_db function from db.py.
    """
    return await get_db_store(request)
