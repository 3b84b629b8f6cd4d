"""Health check endpoint."""

from fastapi import APIRouter, Depends

import config
from api.deps import get_db
from db import MemoryStore

router = APIRouter()


@router.get("/health")
async def health_check(db: MemoryStore = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
        dict: Status, environment, and whether the signup store is up
    """
    return {
        "status": "ok",
        "env": config.settings.ENV,
        "store": "ready" if db is not None else "unavailable",
    }
