"""Replies resource: check for received replies and confirm them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from messagemedia_messages.controllers.base_controller import USER_AGENT, BaseController
from messagemedia_messages.core.api_helper import clean_url, json_serialize
from messagemedia_messages.core.outcome import Callback
from messagemedia_messages.http.transport import HttpRequest
from messagemedia_messages.sdk.types import (
    CheckRepliesResponse,
    ConfirmRepliesAsReceivedRequest,
)

logger = logging.getLogger(__name__)

CONFIRM_REPLIES_PATH = "/v1/replies/confirmed"
CHECK_REPLIES_PATH = "/v1/replies"


class RepliesController(BaseController):
    """Poll for replies and confirm the ones already processed.

    Typical loop: call :meth:`check_replies`, process each reply, then pass
    the processed reply IDs to :meth:`confirm_replies_as_received` so later
    checks no longer return them. The service returns at most 100 replies per
    check and accepts at most 100 IDs per confirm; neither limit is checked
    here.
    """

    async def confirm_replies_as_received(
        self,
        body: ConfirmRepliesAsReceivedRequest | Mapping[str, Any],
        callback: Callback | None = None,
    ) -> Any:
        """Mark replies as confirmed so they are no longer returned.

        Returns the decoded response body. Raises ``ClientError`` on 400,
        ``TransportError`` on network failure or any other status, and
        ``DeserializationError`` on an unreadable success body. ``callback``
        is invoked once with ``(error, payload, context)`` either way.
        """
        fn = "confirm_replies_as_received"
        logger.info("%s being called", fn)

        logger.info("Preparing Query URL for %s", fn)
        query_url = clean_url(self.configuration.base_uri, CONFIRM_REPLIES_PATH)

        logger.info("Preparing headers for %s", fn)
        headers = {
            "accept": "application/json",
            "content-type": "application/json; charset=utf-8",
            "user-agent": USER_AGENT,
        }

        # Mappings get the same coercion as the model (sets and tuples of IDs)
        if not isinstance(body, ConfirmRepliesAsReceivedRequest):
            body = ConfirmRepliesAsReceivedRequest.model_validate(dict(body))

        request = HttpRequest(
            query_url=query_url,
            method="POST",
            headers=headers,
            body=json_serialize(body),
            username=self.configuration.basic_auth_user_name,
            password=self.configuration.basic_auth_password,
        )

        context, error = await self.send(request, fn)
        outcome = self.classify(context, error, fn, accepts_client_error=True)
        return outcome.settle(callback)

    async def check_replies(self, callback: Callback | None = None) -> CheckRepliesResponse:
        """Fetch replies received and not yet confirmed.

        Repeated calls return the same replies until they are confirmed.
        Errors are raised and delivered to ``callback`` as for
        :meth:`confirm_replies_as_received`, except that a 400 is reported as
        a ``TransportError``.
        """
        fn = "check_replies"
        logger.info("%s being called", fn)

        logger.info("Preparing Query URL for %s", fn)
        query_url = clean_url(self.configuration.base_uri, CHECK_REPLIES_PATH)

        logger.info("Preparing headers for %s", fn)
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }

        request = HttpRequest(
            query_url=query_url,
            method="GET",
            headers=headers,
            username=self.configuration.basic_auth_user_name,
            password=self.configuration.basic_auth_password,
        )

        context, error = await self.send(request, fn)
        mapper = self.get_object_mapper()
        outcome = self.classify(
            context,
            error,
            fn,
            deserialize=lambda value: mapper.map_object(value, "CheckRepliesResponse"),
        )
        return outcome.settle(callback)
