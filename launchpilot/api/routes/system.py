"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from launchpilot import __version__
from launchpilot.api.schemas import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__)
