"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from circlewrap.api import contains, health, wrap

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(wrap.router)
api_router.include_router(contains.router)
