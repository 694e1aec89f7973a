"""FastAPI exception handlers that render the generic error page.

Routing errors (unmatched path, wrong method) render the error view with the
exception's status code; anything unhandled renders it with status 500 and
logs the traceback server-side only.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from animekai.views.renderer import ViewRenderer

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Page not found"
NOT_FOUND_TITLE = "404 - Not Found"
SERVER_ERROR_MESSAGE = "Something went wrong!"
SERVER_ERROR_TITLE = "500 - Server Error"


def register_error_handlers(app: FastAPI, renderer: ViewRenderer) -> None:
    """Wire up the HTML exception handlers on the FastAPI application."""

    async def _http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        if exc.status_code == 404:
            return renderer.render_error(
                request, NOT_FOUND_MESSAGE, title=NOT_FOUND_TITLE, status_code=404
            )
        return renderer.render_error(
            request,
            str(exc.detail),
            title=f"{exc.status_code} - Error",
            status_code=exc.status_code,
        )

    async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
        """Catch-all for unhandled exceptions: log traceback, render generic 500.

        Runs outside the request-ID middleware, so the ID it stored on
        ``request.state`` is copied onto the response and the log line here.
        """
        request_id = getattr(request.state, "request_id", None)
        logger.error(
            "Unhandled exception: %s\n%s",
            exc,
            traceback.format_exc(),
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": 500,
            },
        )
        response = renderer.render_error(
            request, SERVER_ERROR_MESSAGE, title=SERVER_ERROR_TITLE, status_code=500
        )
        if request_id:
            response.headers["X-Request-ID"] = request_id
        return response

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)
