"""Pytest fixtures for the MessageMedia replies client tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from messagemedia_messages.config import Configuration
from messagemedia_messages.http.transport import HttpContext, HttpRequest, HttpResponse
from messagemedia_messages.sdk.client import MessageMediaMessagesClient

REPLIES_PAYLOAD: dict[str, Any] = {
    "replies": [
        {
            "metadata": {"key1": "value1", "key2": "value2"},
            "message_id": "877c19ef-fa2e-4cec-827a-e1df9b5509f7",
            "reply_id": "a175e797-2b54-468b-9850-41a3eab32f74",
            "date_received": "2016-12-07T08:43:00.850Z",
            "callback_url": "https://my.callback.url.com",
            "destination_number": "+61491570156",
            "source_number": "+61491570157",
            "vendor_account_id": {"vendor_id": "MessageMedia", "account_id": "MyAccount"},
            "content": "My first reply!",
        },
        {
            "metadata": {"key1": "value1", "key2": "value2"},
            "message_id": "8f2f5927-2e16-4f1c-bd43-47dbe2a77ae4",
            "reply_id": "3d8d53d8-01d3-45dd-8cfa-4dfc81600f7f",
            "date_received": "2016-12-07T08:43:00.850Z",
            "callback_url": "https://my.callback.url.com",
            "destination_number": "+61491570157",
            "source_number": "+61491570158",
            "vendor_account_id": {"vendor_id": "MessageMedia", "account_id": "MyAccount"},
            "content": "My second reply!",
        },
    ]
}


class StubTransport:
    """Replays canned results and records every request.

    Each result is either ``(status_code, body)`` or an exception to raise.
    The last result repeats once the queue is exhausted.
    """

    def __init__(self, *results: tuple[int, str] | Exception) -> None:
        self.results = list(results)
        self.requests: list[HttpRequest] = []

    async def execute(self, request: HttpRequest) -> HttpContext:
        self.requests.append(request)
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        status_code, body = result
        return HttpContext(
            request=request,
            response=HttpResponse(status_code=status_code, body=body),
        )


class FakeRepliesService:
    """In-memory replies endpoint: confirmed replies drop out of later checks."""

    def __init__(self, replies: list[dict[str, Any]]) -> None:
        self.replies = list(replies)
        self.requests: list[HttpRequest] = []

    async def execute(self, request: HttpRequest) -> HttpContext:
        self.requests.append(request)
        if request.method == "GET" and request.query_url.endswith("/v1/replies"):
            body = json.dumps({"replies": self.replies})
            return HttpContext(request, HttpResponse(200, body=body))
        if request.method == "POST" and request.query_url.endswith("/v1/replies/confirmed"):
            ids = set(json.loads(request.body or "{}").get("reply_ids", []))
            self.replies = [r for r in self.replies if r["reply_id"] not in ids]
            return HttpContext(request, HttpResponse(202, body="{}"))
        return HttpContext(request, HttpResponse(404, body="not found"))


class CallbackSpy:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any, Any]] = []

    def __call__(self, error: Any, payload: Any, context: Any) -> None:
        self.calls.append((error, payload, context))


@pytest.fixture
def configuration() -> Configuration:
    return Configuration(
        base_uri="https://api.messagemedia.test/",
        basic_auth_user_name="api-user",
        basic_auth_password="s3cret-pass",
    )


@pytest.fixture
def callback() -> CallbackSpy:
    return CallbackSpy()


@pytest.fixture
def make_client(configuration):
    """Build a client bound to the given transport."""

    def _make(transport) -> MessageMediaMessagesClient:
        return MessageMediaMessagesClient(configuration=configuration, transport=transport)

    return _make


@pytest.fixture
def replies_body() -> str:
    return json.dumps(REPLIES_PAYLOAD)
