"""MessageMedia Messages API client (replies resource)."""

from messagemedia_messages.config import Configuration
from messagemedia_messages.core.exceptions import (
    APIException,
    ClientError,
    DeserializationError,
    MessageMediaError,
    TransportError,
)
from messagemedia_messages.sdk.client import MessageMediaMessagesClient
from messagemedia_messages.sdk.types import (
    CheckRepliesResponse,
    ConfirmRepliesAsReceivedRequest,
    Reply,
    VendorAccountId,
)

__version__ = "1.0.0"

__all__ = [
    "APIException",
    "CheckRepliesResponse",
    "ClientError",
    "Configuration",
    "ConfirmRepliesAsReceivedRequest",
    "DeserializationError",
    "MessageMediaError",
    "MessageMediaMessagesClient",
    "Reply",
    "TransportError",
    "VendorAccountId",
]
