"""Property tests for route behaviour under arbitrary upstream outcomes.

# Property: failed upstream calls never surface as unhandled faults
# Property: watch page depends only on the anime-detail call
# Property: episodes page requires both calls
# Property: search never calls upstream without a keyword
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from hypothesis import given, settings, strategies as st

from animekai.config.settings import FrontendSettings
from animekai.main import create_app
from animekai.upstream.client import UpstreamClient


# --- Strategies ---

anime_ids = st.from_regex(r"[a-z0-9]{1,12}(-[a-z0-9]{1,8}){0,3}", fullmatch=True)
episode_numbers = st.integers(min_value=1, max_value=2000).map(str)
server_names = st.sampled_from(["HD-1", "HD-2", "Vidstreaming", "MegaCloud"])
stream_types = st.sampled_from(["sub", "dub", "raw"])
titles = st.from_regex(r"[A-Za-z0-9][A-Za-z0-9 :!]{0,30}[A-Za-z0-9]", fullmatch=True)
failure_envelopes = st.sampled_from([
    {"success": False, "error": "Request failed with status code 500"},
    {"success": False, "error": "connect ECONNREFUSED"},
    {"success": False},
    {"success": False, "message": "Not found"},
    {"data": {"title": "no flag"}},
    {"success": 0, "data": {"title": "zero flag"}},
    {"success": "", "data": {"title": "empty flag"}},
])
page_routes = st.sampled_from([
    "/",
    "/anime/abc",
    "/anime/abc/episodes",
    "/watch/abc?ep=2",
    "/browse/most-popular",
    "/browse/genre/action?page=2",
])


def _make_client(answer: Any) -> tuple[TestClient, AsyncMock]:
    """App whose upstream answers every path through ``answer(path)``."""
    upstream = AsyncMock(spec=UpstreamClient)
    upstream.base_url = "https://upstream.test"
    upstream.fetch.side_effect = answer
    app = create_app(settings=FrontendSettings(), client=upstream)
    return TestClient(app, raise_server_exceptions=False), upstream


def _ok(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data}


# --- Failures render the error page ---

@settings(max_examples=50)
@given(route=page_routes, failure=failure_envelopes)
def test_failed_upstream_renders_error_page(route: str, failure: dict) -> None:
    """Every page route renders the error view when all upstream calls fail."""
    client, _ = _make_client(lambda path: failure)

    response = client.get(route)

    assert response.status_code == 200
    assert response.template.name == "error.html"
    assert response.context["title"] == "Error"


@settings(max_examples=50)
@given(route=page_routes, message=st.text(min_size=1, max_size=30))
def test_client_exceptions_render_error_page(route: str, message: str) -> None:
    """Exceptions escaping the upstream client never reach the browser."""

    def _raise(path: str) -> dict:
        raise RuntimeError(message)

    client, _ = _make_client(_raise)

    response = client.get(route)

    assert response.status_code == 200
    assert response.template.name == "error.html"


@settings(max_examples=50)
@given(
    endpoint=st.sampled_from([
        "/api/suggestions?keyword=naruto",
        "/api/servers?id=abc::ep=1",
        "/api/stream?id=abc::ep=1&server=HD-1&type=sub",
    ]),
    failure=failure_envelopes,
)
def test_json_endpoints_pass_failures_through(endpoint: str, failure: dict) -> None:
    client, _ = _make_client(lambda path: failure)

    response = client.get(endpoint)

    assert response.status_code == 200
    assert response.json() == failure


# --- Watch page ---

@settings(max_examples=100)
@given(
    anime_id=anime_ids,
    episode=episode_numbers,
    server=server_names,
    stream_type=stream_types,
    title=titles,
    servers_ok=st.booleans(),
    stream_ok=st.booleans(),
)
def test_watch_depends_only_on_anime_call(
    anime_id: str,
    episode: str,
    server: str,
    stream_type: str,
    title: str,
    servers_ok: bool,
    stream_ok: bool,
) -> None:
    """The watch view renders whenever the anime call succeeds.

    Server list and stream data are None exactly when their calls fail, and
    both lookups are addressed by the composite ``{id}::ep={episode}`` key.
    """
    key = f"{anime_id}::ep={episode}"
    servers_path = f"/api/v1/servers?id={key}"
    stream_path = f"/api/v1/stream?server={server}&type={stream_type}&id={key}"
    table = {f"/api/v1/anime/{anime_id}": _ok({"id": anime_id, "title": title})}
    if servers_ok:
        table[servers_path] = _ok({"sub": [{"name": server}]})
    if stream_ok:
        table[stream_path] = _ok({"url": "https://player.test/e"})

    client, upstream = _make_client(lambda path: table.get(path, {"success": False}))

    response = client.get(
        f"/watch/{anime_id}",
        params={"ep": episode, "server": server, "type": stream_type},
    )

    assert response.template.name == "watch.html"
    assert (response.context["servers"] is not None) == servers_ok
    assert (response.context["stream_data"] is not None) == stream_ok
    assert response.context["title"] == f"Watch {title} Episode {episode} - AnimeKai"
    requested = sorted(call.args[0] for call in upstream.fetch.await_args_list)
    assert requested == sorted([f"/api/v1/anime/{anime_id}", servers_path, stream_path])


# --- Episodes page ---

@settings(max_examples=50)
@given(anime_id=anime_ids, anime_ok=st.booleans(), episodes_ok=st.booleans())
def test_episodes_requires_both_calls(
    anime_id: str, anime_ok: bool, episodes_ok: bool
) -> None:
    table: dict[str, dict] = {}
    if anime_ok:
        table[f"/api/v1/anime/{anime_id}"] = _ok({"id": anime_id, "title": "T"})
    if episodes_ok:
        table[f"/api/v1/episodes/{anime_id}"] = _ok([{"number": 1}])

    client, upstream = _make_client(lambda path: table.get(path, {"success": False}))

    response = client.get(f"/anime/{anime_id}/episodes")

    expected = "episodes.html" if anime_ok and episodes_ok else "error.html"
    assert response.template.name == expected
    assert upstream.fetch.await_count == 2


# --- Search ---

@settings(max_examples=50)
@given(page=st.one_of(st.none(), st.integers(min_value=1, max_value=50).map(str)))
def test_search_without_keyword_never_calls_upstream(page: str | None) -> None:
    client, upstream = _make_client(lambda path: {"success": True, "data": []})

    response = client.get("/search", params={"page": page} if page else None)

    assert response.template.name == "search.html"
    assert response.context["results"] is None
    upstream.fetch.assert_not_awaited()


@settings(max_examples=100)
@given(keyword=st.text(min_size=1, max_size=30).filter(lambda k: "\x00" not in k))
def test_search_keyword_is_percent_encoded(keyword: str) -> None:
    """Whatever the keyword, the upstream path carries no raw reserved chars."""
    client, upstream = _make_client(lambda path: {"success": True, "data": []})

    client.get("/search", params={"keyword": keyword})

    if upstream.fetch.await_count == 0:
        # Keywords that arrive empty after query decoding are treated as absent
        return
    (path,) = (call.args[0] for call in upstream.fetch.await_args_list)
    encoded = path.removeprefix("/api/v1/search?keyword=").removesuffix("&page=1")
    assert not set(encoded) & set(" &=?#/+")
