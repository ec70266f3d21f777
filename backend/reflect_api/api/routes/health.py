"""Health Probe — liveness endpoint mirroring the upstream API's /health.

Invariants:
    - GET /health always returns 200 if the process is up
    - timestamp is the current UTC time in YYYY-MM-DDTHH:MM:SS.sssZ form
"""

from fastapi import APIRouter, status

from reflect_api.config import get_settings
from reflect_api.core.format_timestamps import utc_now_millis

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "success": True,
        "message": "API is running",
        "timestamp": utc_now_millis(),
    }


@router.get("/", status_code=status.HTTP_200_OK)
async def service_info():
    return {"service": get_settings().service_name, "status": "running"}
