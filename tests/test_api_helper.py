"""Tests for URL and JSON helpers."""

from __future__ import annotations

import json

import pytest

from messagemedia_messages.core.api_helper import (
    clean_object,
    clean_url,
    json_deserialize,
    json_serialize,
)
from messagemedia_messages.sdk.types import ConfirmRepliesAsReceivedRequest


@pytest.mark.parametrize(
    "base",
    [
        "https://api.messagemedia.com",
        "https://api.messagemedia.com/",
        "https://api.messagemedia.com//",
    ],
)
def test_clean_url_ignores_trailing_slash_on_base(base):
    assert clean_url(base, "/v1/replies") == "https://api.messagemedia.com/v1/replies"
    assert clean_url(base, "v1/replies") == "https://api.messagemedia.com/v1/replies"


def test_clean_url_collapses_duplicate_slashes():
    url = clean_url("https://api.messagemedia.com//v1", "//replies///confirmed/")
    assert url == "https://api.messagemedia.com/v1/replies/confirmed"


def test_clean_url_keeps_scheme_separator_and_query():
    url = clean_url("http://localhost:8080/", "/v1/replies?a=http://x//y")
    assert url == "http://localhost:8080/v1/replies?a=http://x//y"


def test_clean_url_is_idempotent():
    once = clean_url("https://api.messagemedia.com/", "//v1//replies/")
    assert clean_url(once) == once


def test_clean_url_without_path():
    assert clean_url("https://api.messagemedia.com/") == "https://api.messagemedia.com"


@pytest.mark.parametrize("bad", ["api.messagemedia.com/v1", "ftp://host/v1", ""])
def test_clean_url_rejects_non_http_urls(bad):
    with pytest.raises(ValueError):
        clean_url(bad)


def test_clean_object_drops_nulls_recursively_without_mutating():
    value = {"a": None, "b": {"c": None, "d": 1}, "e": [1, None, {"f": None}]}
    cleaned = clean_object(value)
    assert cleaned == {"b": {"d": 1}, "e": [1, {}]}
    assert value["a"] is None


def test_json_serialize_model():
    body = ConfirmRepliesAsReceivedRequest(reply_ids=["id-1", "id-2"])
    assert json.loads(json_serialize(body)) == {"reply_ids": ["id-1", "id-2"]}


def test_json_serialize_mapping_strips_nulls():
    assert json.loads(json_serialize({"reply_ids": ["x"], "extra": None})) == {"reply_ids": ["x"]}
    assert json_serialize(None) is None


def test_json_deserialize_empty_body_is_none():
    assert json_deserialize("") is None
    assert json_deserialize("   ") is None
    assert json_deserialize('{"ok": true}') == {"ok": True}
