# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Steam OpenID 2.0 identity provider.

This module provides authentication via Steam's OpenID 2.0 endpoint,
allowing users to sign in with their Steam accounts. Steam only vouches
for a SteamID; display name and avatar come from the Steam Web API.
"""

from typing import Any, Mapping, Optional

from steam_logging import Logger, create_logger

from .config import SteamAuthConfig
from .mapper import map_profile
from .models import AuthorizationRequest, Identity, SteamProfile, SyntheticCredential
from .openid_params import build_authorization_parameters, parse_callback
from .openid_verifier import OpenIDAssertionVerifier
from .provider import AssertionIdentityProvider, AuthenticationError, ProviderError
from .steam_profile import SteamProfileResolver


class SteamIdentityProvider(AssertionIdentityProvider):
    """Steam identity provider.

    Composes the OpenID parameter codec, the assertion verifier and the
    profile resolver. Instances hold no per-login state.

    Attributes:
        config: Provider configuration
        verifier: check_authentication client
        resolver: Steam Web API client
    """

    def __init__(
        self,
        config: SteamAuthConfig,
        verifier: Optional[OpenIDAssertionVerifier] = None,
        resolver: Optional[SteamProfileResolver] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the Steam identity provider.

        Args:
            config: Provider configuration
            verifier: Override for the assertion verifier
            resolver: Override for the profile resolver
            logger: Logger for login events
        """
        self.config = config
        self._logger = logger or create_logger(name="steam_auth.provider")
        self.verifier = verifier or OpenIDAssertionVerifier(
            endpoint=config.openid_endpoint,
            provider_domain=config.provider_domain,
            timeout=config.timeout_seconds,
            expected_return_to=config.return_to_url,
            logger=self._logger,
        )
        self.resolver = resolver or SteamProfileResolver(
            api_key=config.api_key.get_secret_value(),
            api_base_url=config.web_api_base_url,
            timeout=config.timeout_seconds,
            logger=self._logger,
        )

    def authorization_request(self) -> AuthorizationRequest:
        return build_authorization_parameters(
            return_to_url=self.config.return_to_url,
            realm_url=self.config.realm,
            endpoint=self.config.openid_endpoint,
        )

    def get_authorization_url(self) -> str:
        """Return the Steam login URL to redirect the user's browser to."""
        return self.authorization_request().url

    def verify_assertion(self, callback_params: Mapping[str, Any]) -> SyntheticCredential:
        callback = parse_callback(callback_params)
        return self.verifier.issue_credential(callback)

    def resolve_profile(self, identifier: str) -> SteamProfile:
        return self.resolver.fetch_profile(identifier)

    def map_profile(self, profile: SteamProfile) -> Identity:
        return map_profile(profile)

    def login(self, callback_params: Mapping[str, Any]) -> tuple[SyntheticCredential, Identity]:
        """Complete a login from the callback query parameters.

        Args:
            callback_params: Query parameters Steam redirected back with

        Returns:
            Tuple of (credential, identity)

        Raises:
            AuthenticationError: If the callback, assertion or profile is rejected
            ProviderError: If Steam cannot be reached
        """
        try:
            credential, identity = super().login(callback_params)
        except (AuthenticationError, ProviderError) as e:
            self._logger.warning("Steam login failed", kind=e.kind)
            raise
        self._logger.info("Steam login succeeded", steam_id=identity.id)
        return credential, identity

    async def alogin(self, callback_params: Mapping[str, Any]) -> tuple[SyntheticCredential, Identity]:
        """Asynchronous ``login``.

        Cancelling the awaiting task aborts whichever request is in flight,
        and nothing is returned to the host.
        """
        try:
            callback = parse_callback(callback_params)
            credential = await self.verifier.aissue_credential(callback)
            profile = await self.resolver.afetch_profile(credential.steam_id)
        except (AuthenticationError, ProviderError) as e:
            self._logger.warning("Steam login failed", kind=e.kind)
            raise
        identity = self.map_profile(profile)
        self._logger.info("Steam login succeeded", steam_id=identity.id)
        return credential, identity
