"""Client facade and typed models."""

from messagemedia_messages.sdk.client import MessageMediaMessagesClient

__all__ = ["MessageMediaMessagesClient"]
