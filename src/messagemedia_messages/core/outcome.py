"""Tagged result of a single API call."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from messagemedia_messages.core.exceptions import MessageMediaError
from messagemedia_messages.http.transport import HttpContext

# (error, payload, context); invoked exactly once per call.
Callback = Callable[[MessageMediaError | None, Any, HttpContext | None], Any]


def noop_callback(_error: MessageMediaError | None, _payload: Any, _context: HttpContext | None) -> None:
    return None


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    TRANSPORT_ERROR = "transport_error"
    DESERIALIZATION_ERROR = "deserialization_error"


@dataclass(frozen=True)
class CallOutcome:
    kind: OutcomeKind
    payload: Any = None
    error: MessageMediaError | None = None
    context: HttpContext | None = None

    @classmethod
    def success(cls, payload: Any, context: HttpContext | None) -> CallOutcome:
        return cls(OutcomeKind.SUCCESS, payload=payload, context=context)

    @classmethod
    def failure(
        cls, kind: OutcomeKind, error: MessageMediaError, context: HttpContext | None
    ) -> CallOutcome:
        return cls(kind, error=error, context=context)

    def settle(self, callback: Callback | None = None) -> Any:
        """Invoke ``callback`` once, then return the payload or raise the error."""
        callback = callback if callable(callback) else noop_callback
        callback(self.error, self.payload, self.context)
        if self.error is not None:
            raise self.error
        return self.payload
