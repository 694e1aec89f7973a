"""Upstream endpoint paths.

Keywords are percent-encoded the way a browser's ``encodeURIComponent``
would; identifiers, pages, server names and types are interpolated as-is.
"""

from __future__ import annotations

from urllib.parse import quote

_API_PREFIX = "/api/v1"

# Characters encodeURIComponent leaves untouched besides [A-Za-z0-9_.-]
_KEYWORD_SAFE = "!~*'()"


def encode_keyword(keyword: str) -> str:
    return quote(keyword, safe=_KEYWORD_SAFE)


def episode_key(anime_id: str, episode: str) -> str:
    """Composite key addressing the servers and stream of one episode."""
    return f"{anime_id}::ep={episode}"


def home() -> str:
    return f"{_API_PREFIX}/home"


def anime(anime_id: str) -> str:
    return f"{_API_PREFIX}/anime/{anime_id}"


def episodes(anime_id: str) -> str:
    return f"{_API_PREFIX}/episodes/{anime_id}"


def servers(composite_id: str) -> str:
    return f"{_API_PREFIX}/servers?id={composite_id}"


def stream(server: str, stream_type: str, composite_id: str) -> str:
    return f"{_API_PREFIX}/stream?server={server}&type={stream_type}&id={composite_id}"


def search(keyword: str, page: str) -> str:
    return f"{_API_PREFIX}/search?keyword={encode_keyword(keyword)}&page={page}"


def suggestion(keyword: str) -> str:
    return f"{_API_PREFIX}/search/suggestion?keyword={encode_keyword(keyword)}"


def browse(query: str, category: str, page: str) -> str:
    """Listing path; the category segment is omitted when empty."""
    path = f"{_API_PREFIX}/animes/{query}"
    if category:
        path += f"/{category}"
    return f"{path}?page={page}"
