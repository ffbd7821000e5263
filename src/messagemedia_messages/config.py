"""Client configuration via environment variables."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from messagemedia_messages.core.api_helper import clean_url

# Load .env from project root (works regardless of CWD)
_project_root = Path(__file__).resolve().parents[2]
load_dotenv(_project_root / ".env")

DEFAULT_BASE_URI = "https://api.messagemedia.com"


class Configuration(BaseSettings):
    """Settings bound to a single client instance.

    Read once at construction; controllers never consult process-wide state.
    """

    # API endpoint
    base_uri: str = DEFAULT_BASE_URI

    # Basic auth
    basic_auth_user_name: str = ""
    basic_auth_password: str = Field(default="", repr=False)

    # Transport
    timeout: float = Field(default=60.0, gt=0)

    # Logging
    log_level: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    log_format: str = "text"  # "text" | "json"

    model_config = SettingsConfigDict(
        env_prefix="MM_",
        extra="ignore",
    )

    @field_validator("base_uri")
    @classmethod
    def _normalize_base_uri(cls, value: str) -> str:
        # Raises ValueError for anything that is not an absolute http(s) URL
        return clean_url(value)
