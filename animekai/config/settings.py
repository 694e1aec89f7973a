"""Pydantic Settings for the AnimeKai web front end.

Environment variables carry no prefix.
Example: PORT=8080, LOG_LEVEL=DEBUG

The upstream base URL is fixed at build time and is not read from the
environment.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

UPSTREAM_BASE_URL = "https://animekai-6wq1.onrender.com"


class FrontendSettings(BaseSettings):
    """Front-end configuration validated from environment variables."""

    # Service
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"

    model_config = {"frozen": True}
