"""Liveness endpoint for the Show Vote API."""

from fastapi import APIRouter, Depends

from showvote import __version__
from showvote.api.dependencies.voting import get_app_config
from showvote.api.models.health import HealthResponse
from showvote.config.app_config import AppConfig

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(config: AppConfig = Depends(get_app_config)) -> HealthResponse:
    """Report the running version and which storage backend is wired in."""
    return HealthResponse(
        version=__version__,
        storage="postgresql" if config.uses_database else "memory",
    )
