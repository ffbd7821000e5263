"""Custom exceptions for the MessageMedia client."""

from __future__ import annotations

from typing import Any


class MessageMediaError(Exception):
    """Base exception for all MessageMedia client errors."""


class APIException(MessageMediaError):
    """A call was rejected, either by the service or before reaching it.

    ``error_response`` holds the raw response body (text) when one was
    received, ``context`` the transport context of the call.
    """

    def __init__(
        self,
        error_message: str = "",
        error_code: int | None = None,
        error_response: str | None = None,
        context: Any = None,
    ) -> None:
        super().__init__(error_message or f"HTTP error {error_code}")
        self.error_message = error_message
        self.error_code = error_code
        self.error_response = error_response
        self.context = context


class ClientError(APIException):
    """The service answered 400 Bad Request."""


class TransportError(APIException):
    """No response was received, or the status code was not one we classify."""


class DeserializationError(MessageMediaError):
    """A success response body could not be parsed or mapped."""

    def __init__(self, message: str, raw_body: str | None = None, context: Any = None) -> None:
        super().__init__(message)
        self.raw_body = raw_body
        self.context = context
