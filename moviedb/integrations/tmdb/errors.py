from __future__ import annotations

from typing import Any


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


class TmdbTransportError(TmdbClientError):
    """The request could not be completed (network failure or non-200 status)."""


class MalformedPayloadError(TmdbClientError):
    """
    A payload could not be mapped onto an entity.

    `field` names the offending JSON key when known. When hydration of an entity
    is aborted, `partial` holds the entity with the fields set before the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        partial: Any = None,
        body_snippet: str | None = None,
    ) -> None:
        super().__init__(message, body_snippet=body_snippet)
        self.field = field
        self.partial = partial
