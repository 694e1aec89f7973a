"""Health endpoint.

- GET /health — service status and the upstream it fronts; no upstream call.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter


def create_health_router(*, client: Any = None) -> APIRouter:
    """Factory that creates the health router with injected dependencies."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        return {
            "success": True,
            "data": {
                "status": "healthy",
                "upstream": client.base_url if client else None,
            },
        }

    return health_router
