"""
Health Endpoints.

    GET /health           liveness, never touches the repository
    GET /health/ready     200 when the note repository answers, else 503
    GET /health/detailed  repository check plus application identity, always 200
"""

import time
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from voicenotes.backend.core.config import get_app_config
from voicenotes.backend.core.logging import get_logger
from voicenotes.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


async def check_repository(request: Request) -> dict[str, Any]:
    """Count the stored notes, reporting how long the repository took."""
    started = time.perf_counter()
    try:
        notes = await request.app.state.note_repository.count()
    except Exception as e:
        # Reported in the check result
        logger.warning("Repository check failed", error=str(e))
        return {"status": "unhealthy", "error": str(e)}
    return {
        "status": "healthy",
        "notes": notes,
        "latency_ms": int((time.perf_counter() - started) * 1000),
    }


async def _report(request: Request) -> dict[str, Any]:
    checks = {"repository": await check_repository(request)}
    failing = sorted(name for name, check in checks.items() if check["status"] != "healthy")
    return {
        "status": "unhealthy" if failing else "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request) -> dict[str, Any]:
    report = await _report(request)
    if report["status"] != "healthy":
        logger.warning("Not ready", checks=report["checks"])
        raise HTTPException(status_code=503, detail=report)
    return report


@router.get("/health/detailed")
async def detailed_health_check(request: Request) -> dict[str, Any]:
    settings = get_app_config().application
    report = await _report(request)
    report["application"] = {
        "name": settings.name,
        "version": settings.version,
        "env": settings.environment,
        "debug": settings.debug,
    }
    return report
