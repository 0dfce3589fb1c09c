# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Identity provider interfaces and the login error taxonomy.

Hosts drive identity providers through an OAuth-shaped contract: a token
response comes in, a user comes out. Providers built on signed assertions
(OpenID 2.0) never issue tokens, so they implement the
``AssertionIdentityProvider`` variant, which verifies the assertion itself
and only then hands the host a locally minted credential.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from .models import Identity, SteamProfile, SyntheticCredential


class IdentityProvider(ABC):
    """Abstract base class for identity providers.

    All identity providers must implement the get_user method to retrieve
    user information based on an authentication token.
    """

    @abstractmethod
    def get_user(self, token: str) -> Optional[Identity]:
        """Retrieve user information from an authentication token.

        Args:
            token: Authentication token (format depends on provider)

        Returns:
            Identity if token is valid, None otherwise

        Raises:
            AuthenticationError: If authentication fails due to invalid token
            ProviderError: If the provider service is unavailable
        """
        pass

    def validate_and_get_user(self, token_response: dict, nonce: Optional[str] = None) -> Optional[Identity]:
        """Validate token response and retrieve user info.

        Default implementation uses the access token directly.

        Args:
            token_response: Token response containing access_token
            nonce: Unused by the default implementation

        Raises:
            AuthenticationError: If no access token is present
        """
        access_token = token_response.get("access_token")
        if not access_token:
            raise AuthenticationError("No access token in response")

        return self.get_user(access_token)


class AssertionIdentityProvider(IdentityProvider):
    """Identity provider that vouches for users with signed assertions.

    The login runs in three steps: redirect to the provider, verify the
    callback assertion server-to-server, resolve the verified identifier
    into a profile. Verification yields a ``SyntheticCredential`` so hosts
    built around token responses can carry the identifier forward; the
    credential's tokens are never used to talk to the provider.
    """

    @abstractmethod
    def get_authorization_url(self) -> str:
        """Return the URL to redirect the user's browser to."""
        pass

    @abstractmethod
    def verify_assertion(self, callback_params: Mapping[str, Any]) -> SyntheticCredential:
        """Verify the provider callback and mint a credential.

        Raises:
            MalformedCallbackError: If the callback is missing required fields
            InvalidAssertionError: If the provider rejects the assertion
            VerificationError: If the provider cannot be reached
        """
        pass

    @abstractmethod
    def resolve_profile(self, identifier: str) -> SteamProfile:
        """Fetch profile attributes for a verified identifier.

        Raises:
            MissingIdentifierError: If identifier is empty
            ProfileNotFoundError: If the provider has no record for it
            ProfileFetchError: If the profile API is unavailable
        """
        pass

    @abstractmethod
    def map_profile(self, profile: SteamProfile) -> Identity:
        """Map a provider profile onto the canonical identity."""
        pass

    def get_user(self, token: str) -> Optional[Identity]:
        """Resolve a user from a verified provider identifier.

        For assertion providers the only meaningful "token" is the
        identifier carried inside the synthetic credential.
        """
        return self.map_profile(self.resolve_profile(token))

    def validate_and_get_user(self, token_response: dict, nonce: Optional[str] = None) -> Optional[Identity]:
        """Resolve the user named by a synthetic credential's ``id`` claim.

        The opaque ``access_token``/``id_token`` values are ignored.

        Raises:
            MissingIdentifierError: If the token response has no ``id``
        """
        identifier = token_response.get("id")
        if not identifier:
            raise MissingIdentifierError("Token response carries no provider identifier")
        return self.get_user(str(identifier))

    def login(self, callback_params: Mapping[str, Any]) -> tuple[SyntheticCredential, Identity]:
        """Run verification and profile resolution for one callback.

        Returns:
            Tuple of (credential, identity)
        """
        credential = self.verify_assertion(callback_params)
        identity = self.validate_and_get_user(credential.to_token_response())
        return credential, identity


class AuthenticationError(Exception):
    """Raised when authentication fails due to invalid credentials."""
    kind = "authentication_failed"


class ProviderError(Exception):
    """Raised when the identity provider service is unavailable."""
    kind = "provider_unavailable"


class MalformedCallbackError(AuthenticationError):
    """Raised when callback parameters do not have the expected shape."""
    kind = "malformed_callback"


class InvalidAssertionError(AuthenticationError):
    """Raised when the provider rejects an assertion or no identifier can be extracted."""
    kind = "invalid_assertion"


class MissingIdentifierError(AuthenticationError):
    """Raised when profile resolution is asked for an empty identifier."""
    kind = "missing_identifier"


class ProfileNotFoundError(AuthenticationError):
    """Raised when the profile API returns no record for the identifier."""
    kind = "profile_not_found"


class VerificationError(ProviderError):
    """Raised when the check_authentication request fails in transport."""
    kind = "verification_transport"


class ProfileFetchError(ProviderError):
    """Raised when the profile API cannot be reached or returns an unusable body."""
    kind = "profile_fetch_failed"
