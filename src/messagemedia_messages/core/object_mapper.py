"""Map decoded JSON values onto the SDK's typed models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from messagemedia_messages.sdk.types import (
    CheckRepliesResponse,
    ConfirmRepliesAsReceivedRequest,
    Reply,
    VendorAccountId,
)


class ObjectMapper:
    """Look up a model by name and validate a raw value into it."""

    def __init__(self) -> None:
        self._models: dict[str, type[BaseModel]] = {
            m.__name__: m
            for m in (
                CheckRepliesResponse,
                ConfirmRepliesAsReceivedRequest,
                Reply,
                VendorAccountId,
            )
        }

    def map_object(self, value: Any, model_name: str) -> BaseModel:
        """Validate ``value`` into the model registered as ``model_name``.

        Raises ``KeyError`` for unknown names and
        ``pydantic.ValidationError`` when the value does not fit.
        """
        model = self._models[model_name]
        return model.model_validate(value)
