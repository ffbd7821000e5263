"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from messagemedia_messages.core.exceptions import APIException, MessageMediaError
from messagemedia_messages.sdk.client import MessageMediaMessagesClient

# Tests swap this for a factory that injects a stub transport.
client_factory: Callable[[], MessageMediaMessagesClient] = MessageMediaMessagesClient


def run_async(coro: Awaitable[int | None]) -> int:
    return int(asyncio.run(coro) or 0)


async def with_client(fn: Callable[[MessageMediaMessagesClient], Awaitable[Any]]) -> int:
    """Run ``fn`` against a fresh client; API failures become exit code 1."""
    try:
        client = client_factory()
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    async with client:
        try:
            await fn(client)
        except MessageMediaError as exc:
            print(f"error: {describe_error(exc)}", file=sys.stderr)
            return 1
    return 0


def describe_error(exc: MessageMediaError) -> str:
    if isinstance(exc, APIException) and exc.error_code is not None:
        detail = f"HTTP {exc.error_code}"
        if exc.error_response:
            detail = f"{detail}: {exc.error_response}"
        return detail
    return str(exc)


def emit(payload: Any, fmt: str = "table") -> None:
    if fmt == "json":
        print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
        return

    if isinstance(payload, dict):
        if "replies" in payload and isinstance(payload["replies"], list):
            _print_rows(payload["replies"])
            return
        _print_kv(payload)
        return

    if isinstance(payload, list):
        _print_rows(payload)
        return

    print(payload)


def _print_kv(data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, ensure_ascii=False, default=str)
        print(f"{key}: {value}")


def _print_rows(rows: list[dict[str, Any]]) -> None:
    if not rows:
        print("(empty)")
        return

    keys: list[str] = []
    for row in rows:
        for key in row.keys():
            if key not in keys:
                keys.append(key)

    widths = {key: len(key) for key in keys}
    string_rows: list[dict[str, str]] = []
    for row in rows:
        rendered: dict[str, str] = {}
        for key in keys:
            value = row.get(key, "")
            if value is None:
                text = ""
            elif isinstance(value, (dict, list)):
                text = json.dumps(value, ensure_ascii=False, default=str)
            else:
                text = str(value)
            rendered[key] = text
            widths[key] = max(widths[key], len(text))
        string_rows.append(rendered)

    print(" | ".join(key.ljust(widths[key]) for key in keys))
    print("-+-".join("-" * widths[key] for key in keys))
    for rendered in string_rows:
        print(" | ".join(rendered[key].ljust(widths[key]) for key in keys))
