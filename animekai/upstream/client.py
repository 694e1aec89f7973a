"""HTTP client for the upstream AnimeKai content API.

Issues a single GET per call against the fixed base URL, following any
redirects the upstream answers with. Transport errors, non-2xx statuses and
undecodable bodies are converted into a failure envelope
``{"success": False, "error": ...}`` instead of being raised, so callers only
ever branch on the ``success`` flag.

No retries, no caching, default httpx timeout.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from animekai.models.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Async client for the upstream content API.

    Parameters
    ----------
    base_url:
        Upstream root (e.g. "https://animekai-6wq1.onrender.com"). Paths
        passed to :meth:`fetch` are appended verbatim.
    transport:
        Optional httpx transport, used in tests to answer without a network.
    """

    def __init__(
        self, base_url: str, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch(self, path: str) -> Any:
        """GET ``base_url + path`` and return the decoded upstream body.

        The body is returned verbatim on success, whatever its JSON type; its
        ``success`` flag is not re-validated here.
        """
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(
                transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.get(url)

            response.raise_for_status()

            return response.json()

        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # ValueError covers json.JSONDecodeError
            logger.warning(
                "API Error for %s: %s",
                path,
                exc,
                extra={"upstream_path": path, "error_reason": str(exc)},
            )
            return ErrorEnvelope(error=str(exc) or type(exc).__name__).to_dict()
