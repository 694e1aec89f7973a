"""HTML view rendering."""

from animekai.views.renderer import ERROR_VIEW, TEMPLATES_DIR, ViewRenderer

__all__ = [
    "ERROR_VIEW",
    "TEMPLATES_DIR",
    "ViewRenderer",
]
