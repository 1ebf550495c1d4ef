"""
Health check endpoints
"""
from datetime import datetime, timezone
from typing import Any, Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from teachify_admin.api.deps import get_client_factory
from teachify_admin.config import Settings, get_settings
from teachify_admin.exceptions import ConfigMissing, StoreUnavailable
from teachify_admin.mongo import open_database

router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
async def health_check():
    """Simple API health check."""
    return {
        "status": "OK",
        "message": "Teachify Server is running",
        "timestamp": _now(),
    }


@router.get("/health/db")
def database_health(
    settings: Settings = Depends(get_settings),
    client_factory: Callable[..., Any] = Depends(get_client_factory),
):
    """MongoDB health check. Connects, pings and disconnects on every call."""
    try:
        uri = settings.require_mongo_uri()
        with open_database(
            uri,
            settings.MONGODB_DB_NAME,
            client_factory=client_factory,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        ):
            pass
    except (ConfigMissing, StoreUnavailable) as exc:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "ERROR",
                "database": "disconnected",
                "error": str(exc),
                "timestamp": _now(),
            },
        )

    return {
        "status": "OK",
        "database": "connected",
        "timestamp": _now(),
    }
