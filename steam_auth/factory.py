# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Factory for creating identity providers based on configuration.

This module provides a factory function to create identity provider
instances from explicit parameters, so hosts can select the provider by
name.
"""

from typing import Optional

from .config import SteamAuthConfig
from .provider import IdentityProvider
from .steam_provider import SteamIdentityProvider


def create_identity_provider(
    provider_type: Optional[str] = None,
    **kwargs
) -> IdentityProvider:
    """Create an identity provider based on type.

    Supported provider types:
    - "steam": SteamIdentityProvider for Steam OpenID 2.0

    Args:
        provider_type: Type of provider to create (required)
        **kwargs: Provider-specific configuration parameters:
            - For Steam: either config (a SteamAuthConfig), or base_url
              (required) and api_key (required), with optional
              callback_path and timeout_seconds

    Returns:
        IdentityProvider instance

    Raises:
        ValueError: If provider_type is unknown or required parameters are missing

    Examples:
        >>> provider = create_identity_provider(
        ...     "steam",
        ...     base_url="https://app.example",
        ...     api_key="your_steam_web_api_key",
        ... )
    """
    if not provider_type:
        raise ValueError(
            "provider_type parameter is required. "
            "Must be one of: steam"
        )

    provider_type = provider_type.lower()

    if provider_type == "steam":
        config = kwargs.get("config")
        if config is None:
            base_url = kwargs.get("base_url")
            api_key = kwargs.get("api_key")

            if not base_url:
                raise ValueError(
                    "base_url parameter is required for Steam provider. "
                    "Provide the host base URL used as the OpenID realm"
                )

            if not api_key:
                raise ValueError(
                    "api_key parameter is required for Steam provider. "
                    "Provide the Steam Web API key explicitly"
                )

            optional = {
                name: kwargs[name]
                for name in ("callback_path", "timeout_seconds")
                if kwargs.get(name) is not None
            }
            config = SteamAuthConfig(base_url=base_url, api_key=api_key, **optional)

        return SteamIdentityProvider(config=config, logger=kwargs.get("logger"))

    else:
        raise ValueError(
            f"Unknown identity provider type: {provider_type}. "
            f"Supported types: steam"
        )
