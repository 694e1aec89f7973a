"""Configuration module."""

from animekai.config.settings import UPSTREAM_BASE_URL, FrontendSettings

__all__ = [
    "FrontendSettings",
    "UPSTREAM_BASE_URL",
]
