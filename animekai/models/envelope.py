"""Envelope helpers shared by the upstream client and the JSON endpoints.

Upstream responses and locally built failures share one shape:
{ success: bool, data?: Any, error?: str, message?: str }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorEnvelope(BaseModel):
    """Locally constructed failure envelope.

    ``message`` describes missing input, ``error`` describes a failed call.
    """

    success: bool = False
    message: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def is_success(envelope: Any) -> bool:
    """True when the envelope reports success and its ``data`` may be read.

    The flag is read for truthiness; bodies that are not JSON objects never
    succeed.
    """
    return isinstance(envelope, dict) and bool(envelope.get("success"))


def data_or_none(envelope: Any) -> Any:
    return envelope.get("data") if is_success(envelope) else None
