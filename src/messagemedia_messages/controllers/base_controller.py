"""Shared request plumbing and response classification for controllers."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx

from messagemedia_messages.config import Configuration
from messagemedia_messages.core.api_helper import json_deserialize
from messagemedia_messages.core.exceptions import (
    ClientError,
    DeserializationError,
    TransportError,
)
from messagemedia_messages.core.object_mapper import ObjectMapper
from messagemedia_messages.core.outcome import CallOutcome, OutcomeKind
from messagemedia_messages.http.transport import HttpContext, HttpRequest, Transport

logger = logging.getLogger(__name__)

USER_AGENT = "messagemedia-messages-python-sdk-1.0.0"

_object_mapper = ObjectMapper()


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 206


class BaseController:
    """Holds the bound configuration and transport for a resource controller."""

    def __init__(self, configuration: Configuration, transport: Transport) -> None:
        self.configuration = configuration
        self.transport = transport

    @staticmethod
    def get_object_mapper() -> ObjectMapper:
        return _object_mapper

    @staticmethod
    def print_error_log(status_code: int | None, function_name: str) -> None:
        logger.error("%s error in %s", status_code, function_name)

    @classmethod
    def validate_response(cls, context: HttpContext | None, function_name: str) -> TransportError:
        """Build the generic error for a failed or unclassified response."""
        response = context.response if context is not None else None
        if response is None:
            return TransportError(
                error_message=f"No response received for {function_name}",
                context=context,
            )
        cls.print_error_log(response.status_code, function_name)
        return TransportError(
            error_message="HTTP Response Not OK",
            error_code=response.status_code,
            error_response=response.body,
            context=context,
        )

    async def send(self, request: HttpRequest, function_name: str) -> tuple[HttpContext, Exception | None]:
        """Dispatch ``request``; a network failure comes back as the second item."""
        logger.debug("Raw request for %s > %s", function_name, json.dumps(request.to_log_dict()))
        logger.info("Sending request for %s...", function_name)
        try:
            return await self.transport.execute(request), None
        except httpx.HTTPError as exc:
            return HttpContext(request=request), exc

    @classmethod
    def classify(
        cls,
        context: HttpContext,
        error: Exception | None,
        function_name: str,
        *,
        accepts_client_error: bool = False,
        deserialize: Callable[[Any], Any] | None = None,
    ) -> CallOutcome:
        """Turn a transport result into exactly one ``CallOutcome``."""
        response = context.response
        if error is not None or response is None:
            logger.error("%s failed: %r", function_name, error)
            return CallOutcome.failure(
                OutcomeKind.TRANSPORT_ERROR,
                cls.validate_response(context, function_name),
                context,
            )

        if is_success(response.status_code):
            logger.debug(
                "Raw response for %s... > %s %s",
                function_name,
                response.status_code,
                response.body,
            )
            try:
                parsed = json_deserialize(response.body)
                if deserialize is not None:
                    logger.info("Deserializing response for %s", function_name)
                    parsed = deserialize(parsed)
            except ValueError as exc:
                logger.error("Could not deserialize response for %s: %s", function_name, exc)
                err = DeserializationError(
                    f"Invalid response body for {function_name}: {exc}",
                    raw_body=response.body,
                    context=context,
                )
                err.__cause__ = exc
                return CallOutcome.failure(OutcomeKind.DESERIALIZATION_ERROR, err, context)
            return CallOutcome.success(parsed, context)

        if accepts_client_error and response.status_code == 400:
            cls.print_error_log(response.status_code, function_name)
            err = ClientError(
                error_message="",
                error_code=400,
                error_response=response.body,
                context=context,
            )
            return CallOutcome.failure(OutcomeKind.CLIENT_ERROR, err, context)

        logger.info("Validating response for %s", function_name)
        return CallOutcome.failure(
            OutcomeKind.TRANSPORT_ERROR,
            cls.validate_response(context, function_name),
            context,
        )
