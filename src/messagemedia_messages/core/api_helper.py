"""URL and JSON helpers shared by controllers."""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel

_URL_RE = re.compile(r"^(https?://[^/?#]+)([^?#]*)(.*)$", re.IGNORECASE)
_SLASHES_RE = re.compile(r"/{2,}")


def clean_url(base: str, path: str | None = None) -> str:
    """Join ``base`` and ``path`` into a normalized absolute URL.

    Duplicate slashes in the path are collapsed and a trailing slash is
    dropped; the scheme separator and any query string are left alone.
    Applying it to its own output returns the same string.
    """
    url = base
    if path:
        url = f"{base.rstrip('/')}/{path.lstrip('/')}"

    match = _URL_RE.match(url.strip())
    if match is None:
        raise ValueError(f"Invalid URL format: {url!r}")

    origin, url_path, rest = match.groups()
    url_path = _SLASHES_RE.sub("/", url_path).rstrip("/")
    return f"{origin}{url_path}{rest}"


def clean_object(value: Any) -> Any:
    """Return a copy of ``value`` with ``None`` entries removed at every level."""
    if isinstance(value, dict):
        return {k: clean_object(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [clean_object(v) for v in value if v is not None]
    return value


def json_serialize(value: Any) -> str | None:
    """Serialize a request body, omitting null fields."""
    if value is None:
        return None
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", exclude_none=True)
    return json.dumps(clean_object(value), separators=(",", ":"))


def json_deserialize(text: str | None) -> Any:
    """Parse a response body; an empty body parses to ``None``."""
    if text is None or not text.strip():
        return None
    return json.loads(text)
