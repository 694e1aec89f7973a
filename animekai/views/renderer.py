"""Jinja2 view rendering.

Thin wrapper over ``Jinja2Templates`` that maps view names
(``anime-details``) to template files (``anime-details.html``) and owns the
generic error page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

ERROR_VIEW = "error"


class ViewRenderer:
    """Renders named views with a per-request context."""

    def __init__(self, directory: Path | str = TEMPLATES_DIR) -> None:
        self._templates = Jinja2Templates(directory=str(directory))

    def render(
        self,
        request: Request,
        view: str,
        context: dict[str, Any],
        status_code: int = 200,
    ) -> Response:
        return self._templates.TemplateResponse(
            request,
            f"{view}.html",
            context,
            status_code=status_code,
        )

    def render_error(
        self,
        request: Request,
        message: str,
        title: str = "Error",
        status_code: int = 200,
    ) -> Response:
        """Render the generic error page."""
        return self.render(
            request,
            ERROR_VIEW,
            {"message": message, "title": title},
            status_code=status_code,
        )
