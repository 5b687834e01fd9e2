from fastapi import APIRouter, Depends, Response, status

from theme_editor.api.dependencies import get_root_provider
from theme_editor.api.schemas import HealthResponse, ReadinessResponse
from theme_editor.core.ports.root import RootDirectoryProvider

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    provider: RootDirectoryProvider = Depends(get_root_provider),
) -> ReadinessResponse:
    """Readiness probe: checks that the root directory exists."""
    if provider.root_directory().is_dir():
        return ReadinessResponse(status="ok", root="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", root="down")
