"""JSON pass-through endpoints used by in-page scripts.

- GET /api/suggestions?keyword=   search suggestions
- GET /api/servers?id=            servers for an episode key
- GET /api/stream?id=&server=&type=   stream link

Upstream envelopes are returned unchanged. Missing parameters are rejected
with a 400 ``{success: false, message}`` before any upstream call.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from animekai.models.envelope import ErrorEnvelope
from animekai.upstream import paths

logger = logging.getLogger(__name__)


def _missing(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content=ErrorEnvelope(message=message).to_dict())


def _failed(exc: Exception) -> JSONResponse:
    return JSONResponse(content=ErrorEnvelope(error=str(exc)).to_dict())


def create_api_router(*, client: Any) -> APIRouter:
    """Factory that creates the JSON API router with injected dependencies."""

    api_router = APIRouter(prefix="/api", tags=["api"])

    @api_router.get("/suggestions")
    async def suggestions(keyword: str | None = None) -> JSONResponse:
        try:
            if not keyword:
                return _missing("Keyword required")

            return JSONResponse(content=await client.fetch(paths.suggestion(keyword)))
        except Exception as exc:
            logger.exception("Suggestions failed for %r", keyword)
            return _failed(exc)

    @api_router.get("/servers")
    async def servers(
        composite_id: str | None = Query(default=None, alias="id"),
    ) -> JSONResponse:
        try:
            if not composite_id:
                return _missing("ID required")

            return JSONResponse(content=await client.fetch(paths.servers(composite_id)))
        except Exception as exc:
            logger.exception("Servers lookup failed for %s", composite_id)
            return _failed(exc)

    @api_router.get("/stream")
    async def stream(
        composite_id: str | None = Query(default=None, alias="id"),
        server: str | None = None,
        stream_type: str | None = Query(default=None, alias="type"),
    ) -> JSONResponse:
        try:
            if not composite_id or not server or not stream_type:
                return _missing("Missing required parameters")

            return JSONResponse(
                content=await client.fetch(
                    paths.stream(server, stream_type, composite_id)
                )
            )
        except Exception as exc:
            logger.exception("Stream lookup failed for %s", composite_id)
            return _failed(exc)

    return api_router
