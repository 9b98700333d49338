"""Errors raised by the weather API client."""

from enum import Enum
from typing import Optional


class ClientErrorKind(str, Enum):
    """Closed set of weather client failures."""

    MISSING_CREDENTIALS = "API key not set"
    NOT_FOUND = "Location not found"
    GENERIC = "Failed to get weather data"


class ClientError(Exception):
    """Raised when weather data cannot be obtained."""

    def __init__(
        self,
        kind: ClientErrorKind,
        detail: str = "",
        status_code: Optional[int] = None,
    ):
        message = f"Client error: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.kind = kind
        self.detail = detail
        self.status_code = status_code

    @classmethod
    def missing_credentials(cls) -> "ClientError":
        return cls(ClientErrorKind.MISSING_CREDENTIALS)

    @classmethod
    def not_found(cls, detail: str = "") -> "ClientError":
        return cls(ClientErrorKind.NOT_FOUND, detail=detail, status_code=404)

    @classmethod
    def generic(cls, detail: str = "", status_code: Optional[int] = None) -> "ClientError":
        return cls(ClientErrorKind.GENERIC, detail=detail, status_code=status_code)
