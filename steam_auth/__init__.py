# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Steam OpenID 2.0 authentication adapter.

Signs users in through Steam's OpenID 2.0 endpoint, verifies the returned
assertion server-to-server, and resolves the verified SteamID into a
display name and avatar through the Steam Web API.
"""

__version__ = "0.1.0"

from .config import SteamAuthConfig, load_steam_auth_config
from .factory import create_identity_provider
from .mapper import map_profile
from .models import (
    AuthorizationRequest,
    CallbackParameters,
    Identity,
    SteamProfile,
    SyntheticCredential,
    VerificationResult,
)
from .openid_params import (
    build_authorization_parameters,
    build_verification_parameters,
    parse_callback,
)
from .openid_verifier import OpenIDAssertionVerifier
from .provider import (
    AssertionIdentityProvider,
    AuthenticationError,
    IdentityProvider,
    InvalidAssertionError,
    MalformedCallbackError,
    MissingIdentifierError,
    ProfileFetchError,
    ProfileNotFoundError,
    ProviderError,
    VerificationError,
)
from .steam_profile import SteamProfileResolver
from .steam_provider import SteamIdentityProvider

__all__ = [
    # Version
    "__version__",
    # Models
    "AuthorizationRequest",
    "CallbackParameters",
    "Identity",
    "SteamProfile",
    "SyntheticCredential",
    "VerificationResult",
    # Configuration
    "SteamAuthConfig",
    "load_steam_auth_config",
    # Pipeline
    "build_authorization_parameters",
    "build_verification_parameters",
    "parse_callback",
    "OpenIDAssertionVerifier",
    "SteamProfileResolver",
    "map_profile",
    # Providers
    "IdentityProvider",
    "AssertionIdentityProvider",
    "SteamIdentityProvider",
    # Factory
    "create_identity_provider",
    # Exceptions
    "AuthenticationError",
    "ProviderError",
    "MalformedCallbackError",
    "InvalidAssertionError",
    "MissingIdentifierError",
    "ProfileNotFoundError",
    "VerificationError",
    "ProfileFetchError",
]
