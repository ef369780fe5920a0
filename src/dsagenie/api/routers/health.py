"""
Health check endpoints for monitoring and deployment probes.
"""

from fastapi import APIRouter, Depends

from ..models.common import HealthStatus, ReadinessStatus
from ..dependencies.managers import get_model_manager
from dsagenie.models.manager import ModelManager

router = APIRouter()


@router.get("", response_model=HealthStatus)
async def health_check():
    """Liveness probe. Does not touch any external API."""
    return HealthStatus(ok=True)


@router.get("/ready", response_model=ReadinessStatus)
async def readiness_check(model_manager: ModelManager = Depends(get_model_manager)):
    """
    Readiness probe.

    Reports ready only when every credential and setting the endpoints need is
    present in the environment. No network calls are made.
    """
    missing = model_manager.missing_credentials() + model_manager.youtube.missing_settings()
    return ReadinessStatus(ready=not missing, missing=missing)
