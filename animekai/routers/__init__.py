"""HTTP routers."""

from animekai.routers.api import create_api_router
from animekai.routers.health import create_health_router
from animekai.routers.pages import create_pages_router

__all__ = [
    "create_api_router",
    "create_health_router",
    "create_pages_router",
]
