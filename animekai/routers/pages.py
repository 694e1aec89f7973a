"""Server-rendered page routes.

- GET /                              home listing
- GET /anime/{anime_id}              anime details
- GET /anime/{anime_id}/episodes     anime details + episode list
- GET /watch/{anime_id}              anime details + servers + stream link
- GET /search                        keyword search
- GET /browse/{query}[/{category}]   listings by query and category

Routes needing several upstream resources fetch them concurrently and wait
for all of them. Any failure renders the generic error page; exceptions
never reach the client. A successful anime lookup without an anime record
counts as a failure.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any

from fastapi import APIRouter, Query, Request
from starlette.responses import Response

from animekai.models.envelope import data_or_none, is_success
from animekai.upstream import paths

logger = logging.getLogger(__name__)

SITE_NAME = "AnimeKai"

DEFAULT_EPISODE = "1"
DEFAULT_SERVER = "HD-1"
DEFAULT_TYPE = "sub"
DEFAULT_PAGE = "1"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_page(page: str) -> int | None:
    """Integer value of the leading digits of ``page``, or None."""
    match = _LEADING_INT.match(page)
    return int(match.group(1)) if match else None


class MissingAnimeError(LookupError):
    """Upstream reported success without an anime record in ``data``."""


def _anime_of(envelope: dict[str, Any]) -> dict[str, Any]:
    anime = envelope.get("data")
    if not isinstance(anime, dict):
        raise MissingAnimeError("Anime record missing from upstream response")
    return anime


def create_pages_router(*, client: Any, renderer: Any) -> APIRouter:
    """Factory that creates the page router with injected dependencies.

    Parameters
    ----------
    client:
        UpstreamClient used for every upstream fetch.
    renderer:
        ViewRenderer used for page and error views.
    """

    pages_router = APIRouter(tags=["pages"])

    @pages_router.get("/")
    async def home(request: Request) -> Response:
        try:
            home_data = await client.fetch(paths.home())

            if is_success(home_data):
                return renderer.render(
                    request,
                    "home",
                    {"data": home_data.get("data"), "title": f"{SITE_NAME} - Home"},
                )
            return renderer.render_error(request, "Failed to load home data")
        except Exception:
            logger.exception("Home page failed")
            return renderer.render_error(request, "Server error occurred")

    @pages_router.get("/anime/{anime_id}")
    async def anime_details(request: Request, anime_id: str) -> Response:
        try:
            anime_data = await client.fetch(paths.anime(anime_id))

            if is_success(anime_data):
                anime = _anime_of(anime_data)
                name = anime.get("title", "")
                return renderer.render(
                    request,
                    "anime-details",
                    {"anime": anime, "title": f"{name} - {SITE_NAME}"},
                )
            return renderer.render_error(request, "Anime not found")
        except Exception:
            logger.exception("Anime details page failed for %s", anime_id)
            return renderer.render_error(request, "Failed to load anime details")

    @pages_router.get("/anime/{anime_id}/episodes")
    async def episodes(request: Request, anime_id: str) -> Response:
        try:
            anime_data, episodes_data = await asyncio.gather(
                client.fetch(paths.anime(anime_id)),
                client.fetch(paths.episodes(anime_id)),
            )

            if is_success(anime_data) and is_success(episodes_data):
                anime = _anime_of(anime_data)
                name = anime.get("title", "")
                return renderer.render(
                    request,
                    "episodes",
                    {
                        "anime": anime,
                        "episodes": episodes_data.get("data"),
                        "title": f"{name} Episodes - {SITE_NAME}",
                    },
                )
            return renderer.render_error(request, "Failed to load episodes")
        except Exception:
            logger.exception("Episodes page failed for %s", anime_id)
            return renderer.render_error(request, "Failed to load episodes")

    @pages_router.get("/watch/{anime_id}")
    async def watch(
        request: Request,
        anime_id: str,
        ep: str | None = None,
        server: str | None = None,
        stream_type: str | None = Query(default=None, alias="type"),
    ) -> Response:
        try:
            episode = ep or DEFAULT_EPISODE
            server_name = server or DEFAULT_SERVER
            stream_type = stream_type or DEFAULT_TYPE
            key = paths.episode_key(anime_id, episode)

            anime_data, servers_data, stream_data = await asyncio.gather(
                client.fetch(paths.anime(anime_id)),
                client.fetch(paths.servers(key)),
                client.fetch(paths.stream(server_name, stream_type, key)),
            )

            if is_success(anime_data):
                anime = _anime_of(anime_data)
                name = anime.get("title", "")
                return renderer.render(
                    request,
                    "watch",
                    {
                        "anime": anime,
                        "servers": data_or_none(servers_data),
                        "stream_data": data_or_none(stream_data),
                        "current_episode": episode,
                        "current_server": server_name,
                        "current_type": stream_type,
                        "title": f"Watch {name} Episode {episode} - {SITE_NAME}",
                    },
                )
            return renderer.render_error(request, "Failed to load watch page")
        except Exception:
            logger.exception("Watch page failed for %s", anime_id)
            return renderer.render_error(request, "Failed to load watch page")

    @pages_router.get("/search")
    async def search(
        request: Request,
        keyword: str | None = None,
        page: str | None = None,
    ) -> Response:
        keyword = keyword or ""
        try:
            if not keyword:
                return renderer.render(
                    request,
                    "search",
                    {"results": None, "keyword": "", "title": f"Search - {SITE_NAME}"},
                )

            page = page or DEFAULT_PAGE
            search_data = await client.fetch(paths.search(keyword, page))

            return renderer.render(
                request,
                "search",
                {
                    "results": data_or_none(search_data),
                    "keyword": keyword,
                    "current_page": parse_page(page),
                    "title": f"Search: {keyword} - {SITE_NAME}",
                },
            )
        except Exception:
            logger.exception("Search page failed for %r", keyword)
            return renderer.render(
                request,
                "search",
                {"results": None, "keyword": keyword, "title": f"Search - {SITE_NAME}"},
            )

    async def _browse(
        request: Request, query: str, category: str, page: str | None
    ) -> Response:
        try:
            page = page or DEFAULT_PAGE
            browse_data = await client.fetch(paths.browse(query, category, page))

            if is_success(browse_data):
                heading = query.replace("-", " ", 1).upper()
                return renderer.render(
                    request,
                    "browse",
                    {
                        "data": browse_data.get("data"),
                        "query": query,
                        "category": category,
                        "current_page": parse_page(page),
                        "title": f"Browse {heading} - {SITE_NAME}",
                    },
                )
            return renderer.render_error(request, "Failed to load browse data")
        except Exception:
            logger.exception("Browse page failed for %s/%s", query, category)
            return renderer.render_error(request, "Failed to load browse data")

    @pages_router.get("/browse/{query}")
    async def browse(request: Request, query: str, page: str | None = None) -> Response:
        return await _browse(request, query, "", page)

    @pages_router.get("/browse/{query}/{category}")
    async def browse_category(
        request: Request, query: str, category: str, page: str | None = None
    ) -> Response:
        return await _browse(request, query, category, page)

    return pages_router
