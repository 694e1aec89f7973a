"""Upstream content API access."""

from animekai.upstream import paths
from animekai.upstream.client import UpstreamClient

__all__ = [
    "UpstreamClient",
    "paths",
]
