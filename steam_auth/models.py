# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Data models for the Steam OpenID 2.0 login pipeline.

Every model here is either immutable or scoped to a single login attempt,
so instances can be shared freely between threads and tasks.
"""

import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import urlencode


@dataclass(frozen=True)
class AuthorizationRequest:
    """The ``checkid_setup`` request that sends the browser to the provider.

    Attributes:
        endpoint: Provider OpenID endpoint the browser is redirected to
        params: ``openid.*`` query fields, read-only
    """
    endpoint: str
    params: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.endpoint, frozenset(self.params.items())))

    @property
    def url(self) -> str:
        """Full redirect URL with the query string encoded."""
        return f"{self.endpoint}?{urlencode(dict(self.params))}"


@dataclass(frozen=True)
class CallbackParameters:
    """The ``openid.*`` fields the provider sent back to the callback URL.

    Only shape has been checked when an instance exists; nothing in it is
    trusted until the assertion has been verified with the provider.
    """
    fields: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))

    def get(self, name: str) -> Optional[str]:
        """Return ``openid.<name>`` or None when the provider did not send it."""
        return self.fields.get(f"openid.{name}")

    @property
    def mode(self) -> Optional[str]:
        return self.get("mode")

    @property
    def claimed_id(self) -> Optional[str]:
        return self.get("claimed_id")

    @property
    def signed(self) -> tuple[str, ...]:
        """Field names listed in ``openid.signed``, in order, blanks dropped."""
        raw = self.get("signed") or ""
        return tuple(name.strip() for name in raw.split(",") if name.strip())


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of the ``check_authentication`` round trip.

    ``steam_id`` is only ever set on a valid result, and is None rather
    than a sentinel number when no identifier could be extracted.
    """
    is_valid: bool
    steam_id: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def invalid(cls, reason: str) -> "VerificationResult":
        return cls(is_valid=False, steam_id=None, reason=reason)

    @property
    def has_identifier(self) -> bool:
        return self.is_valid and bool(self.steam_id)


@dataclass(frozen=True)
class SyntheticCredential:
    """Locally minted token pair standing in for an OAuth token response.

    Steam never issues tokens. The two values are random session
    correlators with no meaning to the provider and must never be sent to it.

    Attributes:
        steam_id: Verified 64-bit SteamID as a decimal string
        id_token: Random opaque value
        access_token: Random opaque value, independent of ``id_token``
    """
    steam_id: str
    id_token: str = field(default_factory=lambda: str(uuid.uuid4()), repr=False)
    access_token: str = field(default_factory=lambda: str(uuid.uuid4()), repr=False)

    def to_token_response(self) -> dict[str, str]:
        """Render as the token-response mapping an OAuth host expects."""
        return {
            "id_token": self.id_token,
            "access_token": self.access_token,
            "id": self.steam_id,
        }


@dataclass(frozen=True)
class SteamProfile:
    """Player summary returned by ``ISteamUser/GetPlayerSummaries``."""
    steamid: str
    personaname: str
    profileurl: str = ""
    avatar: str = ""
    avatarmedium: str = ""
    avatarfull: str = ""
    communityvisibilitystate: Optional[int] = None
    profilestate: Optional[int] = None
    lastlogoff: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SteamProfile":
        """Build a profile from one element of ``response.players``.

        Raises:
            KeyError: If ``steamid`` or ``personaname`` is missing
        """
        return cls(
            steamid=str(data["steamid"]),
            personaname=str(data["personaname"]),
            profileurl=data.get("profileurl", ""),
            avatar=data.get("avatar", ""),
            avatarmedium=data.get("avatarmedium", ""),
            avatarfull=data.get("avatarfull", ""),
            communityvisibilitystate=data.get("communityvisibilitystate"),
            profilestate=data.get("profilestate"),
            lastlogoff=data.get("lastlogoff"),
        )


@dataclass(frozen=True)
class Identity:
    """Canonical identity handed to the host after a successful login.

    Attributes:
        id: Provider identifier (the SteamID)
        display_name: Name to show for the user
        image_url: Highest resolution avatar URL
    """
    id: str
    display_name: str
    image_url: str

    def to_dict(self) -> dict:
        """Convert identity to dictionary for serialization.

        Returns:
            Dictionary with ``id``, ``displayName`` and ``imageUrl`` keys
        """
        return {
            "id": self.id,
            "displayName": self.display_name,
            "imageUrl": self.image_url,
        }
