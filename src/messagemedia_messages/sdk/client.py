"""Async client facade for the MessageMedia Messages API."""

from __future__ import annotations

from messagemedia_messages.config import Configuration
from messagemedia_messages.controllers.replies_controller import RepliesController
from messagemedia_messages.http.transport import HttpxTransport, Transport


class MessageMediaMessagesClient:
    """Binds one configuration and transport to the resource controllers."""

    def __init__(
        self,
        configuration: Configuration | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.configuration = configuration or Configuration()
        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(timeout=self.configuration.timeout)
        self.replies = RepliesController(self.configuration, self.transport)

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self.transport, HttpxTransport):
            await self.transport.aclose()

    async def __aenter__(self) -> MessageMediaMessagesClient:
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()
