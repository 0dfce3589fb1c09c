# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Configuration for the Steam identity provider.

The provider receives an explicit ``SteamAuthConfig`` at construction time
rather than reading process state on every request. ``load_steam_auth_config``
is a convenience for hosts that keep these values in the environment.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator

from .openid_params import STEAM_OPENID_ENDPOINT

DEFAULT_CALLBACK_PATH = "/api/auth/callback/steam"
DEFAULT_PROVIDER_DOMAIN = "steamcommunity.com"
DEFAULT_WEB_API_BASE_URL = "https://api.steampowered.com"
DEFAULT_TIMEOUT_SECONDS = 10.0


class SteamAuthConfig(BaseModel):
    """Settings for one Steam login integration."""

    model_config = {"frozen": True}

    base_url: str = Field(..., description="Public base URL of the host, used as the OpenID realm")
    api_key: SecretStr = Field(..., description="Steam Web API key for profile lookups")
    callback_path: str = Field(
        default=DEFAULT_CALLBACK_PATH, description="Path on the host that receives the OpenID callback"
    )
    openid_endpoint: str = Field(default=STEAM_OPENID_ENDPOINT, description="Steam OpenID endpoint")
    provider_domain: str = Field(
        default=DEFAULT_PROVIDER_DOMAIN, description="Domain that prefixes verified claimed_id URLs"
    )
    web_api_base_url: str = Field(default=DEFAULT_WEB_API_BASE_URL, description="Steam Web API base URL")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Bound on each outbound provider request"
    )

    @field_validator("base_url", "openid_endpoint", "web_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"URL must be absolute http(s): {value!r}")
        return value

    @field_validator("callback_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    @property
    def realm(self) -> str:
        return self.base_url

    @property
    def return_to_url(self) -> str:
        return f"{self.base_url}{self.callback_path}"


def _first(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def load_steam_auth_config(environ: Optional[Mapping[str, str]] = None) -> SteamAuthConfig:
    """Build a ``SteamAuthConfig`` from environment variables.

    Reads ``STEAM_AUTH_BASE_URL`` (or ``NEXTAUTH_URL``), ``STEAM_API_KEY``
    (or ``STEAM_API``), and optionally ``STEAM_AUTH_CALLBACK_PATH`` and
    ``STEAM_AUTH_TIMEOUT_SECONDS``.

    Args:
        environ: Mapping to read from (default: ``os.environ``)

    Returns:
        Validated configuration

    Raises:
        ValueError: If a required variable is missing
        pydantic.ValidationError: If a value is malformed
    """
    environ = os.environ if environ is None else environ

    base_url = _first(environ, "STEAM_AUTH_BASE_URL", "NEXTAUTH_URL")
    if not base_url:
        raise ValueError("STEAM_AUTH_BASE_URL (or NEXTAUTH_URL) must be set to the host base URL")

    api_key = _first(environ, "STEAM_API_KEY", "STEAM_API")
    if not api_key:
        raise ValueError("STEAM_API_KEY (or STEAM_API) must be set to a Steam Web API key")

    overrides: dict[str, object] = {}
    callback_path = environ.get("STEAM_AUTH_CALLBACK_PATH")
    if callback_path:
        overrides["callback_path"] = callback_path
    timeout = environ.get("STEAM_AUTH_TIMEOUT_SECONDS")
    if timeout:
        overrides["timeout_seconds"] = timeout

    return SteamAuthConfig(base_url=base_url, api_key=api_key, **overrides)
