"""Request/response descriptors and the httpx-backed transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx


@dataclass(frozen=True)
class HttpRequest:
    """Fully-specified outbound request."""

    query_url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "queryUrl": self.query_url,
            "method": self.method,
            "headers": self.headers,
            "body": self.body,
            "username": self.username,
            "password": "***" if self.password else None,
        }


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


@dataclass(frozen=True)
class HttpContext:
    """Request plus the response it produced, if any."""

    request: HttpRequest
    response: HttpResponse | None = None


@runtime_checkable
class Transport(Protocol):
    """Sends one request and returns its context.

    Raises ``httpx.HTTPError`` when no response could be obtained.
    """

    async def execute(self, request: HttpRequest) -> HttpContext: ...


class HttpxTransport:
    """Transport over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(timeout=timeout, trust_env=False)

    async def execute(self, request: HttpRequest) -> HttpContext:
        auth = None
        if request.username or request.password:
            auth = httpx.BasicAuth(request.username or "", request.password or "")
        resp = await self._client.request(
            request.method,
            request.query_url,
            headers=request.headers,
            content=request.body,
            auth=auth,
        )
        response = HttpResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.text,
        )
        return HttpContext(request=request, response=response)

    async def aclose(self) -> None:
        await self._client.aclose()
