"""Public models for the AnimeKai front end."""

from animekai.models.envelope import ErrorEnvelope, data_or_none, is_success

__all__ = [
    "ErrorEnvelope",
    "data_or_none",
    "is_success",
]
