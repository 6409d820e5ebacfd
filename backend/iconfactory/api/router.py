"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from iconfactory.api import ai, health, icons

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(ai.router)
api_router.include_router(icons.router)
