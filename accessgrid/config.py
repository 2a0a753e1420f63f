"""
Environment configuration for AccessGrid clients.

Reads ``ACCESSGRID_ACCOUNT_ID``, ``ACCESSGRID_SECRET_KEY`` and the optional
``ACCESSGRID_BASE_URL`` / ``ACCESSGRID_TIMEOUT`` from the environment or a
local ``.env`` file.
"""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BASE_URL, DEFAULT_CONFIG


class AccessGridSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ACCESSGRID_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    account_id: Optional[str] = Field(
        default=None,
        description="AccessGrid account id, sent as X-ACCT-ID.",
    )
    secret_key: Optional[SecretStr] = Field(
        default=None,
        description="Shared secret used to sign requests.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="API base URL.",
    )
    timeout: float = Field(
        default=DEFAULT_CONFIG['timeout'],
        gt=0,
        description="Timeout per request (seconds).",
    )
