"""POST /api/ai/generate — icon set generation from a text description."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from iconfactory.config import settings
from iconfactory.errors import EmptyResultError, LLMNotConfiguredError, LLMRequestError
from iconfactory.models.requests import GenerateRequest
from iconfactory.models.responses import (
    AIHealthResponse,
    AIServiceInfo,
    GenerateData,
    GenerateResponse,
)

router = APIRouter(prefix="/ai")
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    from iconfactory.ingest.service import generate_icons

    count = min(req.count, settings.max_icons_per_request)
    logger.info("Generating icons for prompt %r with style %s", req.prompt, req.style.value)

    try:
        result = await generate_icons(req.prompt, req.style.value, count)
    except LLMNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=f"AI service not configured: {e}") from e
    except EmptyResultError as e:
        logger.warning("Icon generation returned no usable icons")
        raise HTTPException(status_code=422, detail=str(e)) from e
    except LLMRequestError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    logger.info("Generated %d icons (%s)", len(result.icons), result.kind.value)
    return GenerateResponse(
        data=GenerateData(
            prompt=req.prompt,
            style=req.style.value,
            count=len(result.icons),
            icons=result.icons,
            generated_at=datetime.now(timezone.utc).isoformat(),
            extraction=result.kind.value,
        )
    )


@router.get("/health", response_model=AIHealthResponse)
async def ai_health() -> AIHealthResponse:
    from iconfactory.llm.client import is_configured

    return AIHealthResponse(
        ai_service=AIServiceInfo(configured=is_configured(), model=settings.model_generate),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
