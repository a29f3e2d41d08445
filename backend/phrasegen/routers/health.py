"""
Health check endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from phrasegen.config import settings
from phrasegen.exceptions import WordlistError
from phrasegen.services.telemetry import get_counters_snapshot
from phrasegen.wordlist import load_wordlist

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness check - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check():
    """
    Kubernetes-style readiness check.
    Returns 200 if the configured wordlist loads, 503 otherwise.
    """
    checks = {}
    all_healthy = True

    try:
        load_wordlist(settings.MNEMONIC_LANGUAGE)
        checks["wordlist"] = "healthy"
    except WordlistError:
        checks["wordlist"] = "unavailable"
        all_healthy = False

    response_data = {
        "status": "healthy" if all_healthy else "unhealthy",
        "checks": checks,
        "counters": get_counters_snapshot(),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if all_healthy:
        return response_data
    else:
        return JSONResponse(status_code=503, content=response_data)
