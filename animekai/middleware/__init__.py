"""Middleware package: error pages and request ID."""

from animekai.middleware.error_handler import register_error_handlers
from animekai.middleware.request_id import RequestIdMiddleware

__all__ = [
    "RequestIdMiddleware",
    "register_error_handlers",
]
