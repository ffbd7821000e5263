"""Typed request/response shapes for the replies resource."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Documented limits of the remote service; not enforced client-side.
MAX_CONFIRM_REPLY_IDS = 100
MAX_REPLIES_PER_CHECK = 100


class ConfirmRepliesAsReceivedRequest(BaseModel):
    """Reply IDs to mark as processed (up to 100 per request)."""

    reply_ids: list[str] = Field(default_factory=list)


class VendorAccountId(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    vendor_id: str | None = None
    account_id: str | None = None


class Reply(BaseModel):
    """One received reply message.

    Source and destination numbers are the inverse of those on the message
    the reply answers. ``destination_number`` is absent when that message had
    no source number.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    metadata: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    message_id: str | None = None
    reply_id: str
    date_received: datetime | None = None
    callback_url: str | None = None
    destination_number: str | None = None
    source_number: str | None = None
    vendor_account_id: VendorAccountId | None = None
    content: str | None = None

    @field_validator("metadata", mode="after")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("metadata")
    def _dump_metadata(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


class CheckRepliesResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    replies: list[Reply] = Field(default_factory=list)

    @property
    def reply_ids(self) -> list[str]:
        return [r.reply_id for r in self.replies]
