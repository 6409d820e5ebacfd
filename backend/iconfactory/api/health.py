"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from iconfactory import __version__
from iconfactory.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from iconfactory.llm.prompts import get_all_templates

    return get_all_templates()
