from __future__ import annotations

from typing import Optional


class RetrievalError(Exception):
    """Base class for failures talking to the Stack Exchange API."""


class TransportError(RetrievalError):
    """Connection failure or timeout."""


class StatusError(RetrievalError):
    def __init__(self, status_code: int, detail: Optional[str] = None) -> None:
        message = f"API returned status {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class DecodeError(RetrievalError):
    """Response body was not the JSON shape we expect."""
