"""AnimeKai web front end: server-rendered pages over the AnimeKai content API."""

__version__ = "1.0.0"
