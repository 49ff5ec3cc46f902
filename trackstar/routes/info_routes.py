import platform
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from trackstar.config import API_DESCRIPTION, API_TITLE, API_VERSION

router = APIRouter(tags=["Info"])

_started_at = time.monotonic()


@router.get("/", summary="API information")
async def api_info():
    return {
        "message": f"{API_TITLE} - {API_DESCRIPTION}",
        "version": API_VERSION,
        "endpoints": {
            "documentation": "/api-docs",
            "users": "/api/users",
            "tasks": "/api/tasks",
            "habits": "/api/habits",
            "habitLogs": "/api/habit-logs",
        },
        "status": "operational",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health", summary="Health check")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - _started_at, 3),
        "version": platform.python_version(),
    }
