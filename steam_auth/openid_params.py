# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""OpenID 2.0 parameter sets for the Steam login flow.

Builds the ``checkid_setup`` redirect, extracts the ``openid.*`` fields from
a callback query, and derives the ``check_authentication`` form body from
them.
"""

from typing import Any, Mapping

from .models import AuthorizationRequest, CallbackParameters
from .provider import MalformedCallbackError

STEAM_OPENID_ENDPOINT = "https://steamcommunity.com/openid/login"
OPENID_NS = "http://specs.openid.net/auth/2.0"
IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"

MODE_CHECKID_SETUP = "checkid_setup"
MODE_CHECK_AUTHENTICATION = "check_authentication"
MODE_ID_RES = "id_res"
MODE_CANCEL = "cancel"

# Names a positive assertion may list in openid.signed and have echoed back
SIGNABLE_FIELDS = frozenset({
    "op_endpoint",
    "claimed_id",
    "identity",
    "return_to",
    "response_nonce",
    "assoc_handle",
    "invalidate_handle",
    "signed",
    "ns",
})

# Echoed from the callback on every verification request
_ECHOED_FIELDS = ("assoc_handle", "signed", "sig")


def build_authorization_parameters(
    return_to_url: str,
    realm_url: str,
    endpoint: str = STEAM_OPENID_ENDPOINT,
) -> AuthorizationRequest:
    """Build the ``checkid_setup`` request for a new login attempt.

    The provider picks the identifier at login time, so ``identity`` and
    ``claimed_id`` both carry the identifier-select placeholder.

    Args:
        return_to_url: Host callback URL the provider redirects back to
        realm_url: Host base URL the user is asked to trust
        endpoint: Provider OpenID endpoint

    Returns:
        AuthorizationRequest ready to be rendered as a redirect URL
    """
    return AuthorizationRequest(
        endpoint=endpoint,
        params={
            "openid.ns": OPENID_NS,
            "openid.mode": MODE_CHECKID_SETUP,
            "openid.return_to": return_to_url,
            "openid.realm": realm_url,
            "openid.identity": IDENTIFIER_SELECT,
            "openid.claimed_id": IDENTIFIER_SELECT,
        },
    )


def _single_value(value: Any) -> str | None:
    """Return the one string in ``value`` or None if it is not exactly one string."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and len(value) == 1 and isinstance(value[0], str):
        return value[0]
    return None


def parse_callback(raw_query: Mapping[str, Any]) -> CallbackParameters:
    """Extract the ``openid.*`` fields from a callback query.

    Values may be plain strings or sequences of strings, as produced by
    ``urllib.parse.parse_qs``. Only shape is checked here. A ``cancel``
    response carries no signature, so it is accepted without
    ``openid.signed``.

    Args:
        raw_query: Query parameters of the callback request

    Returns:
        CallbackParameters holding every single-valued ``openid.*`` field

    Raises:
        MalformedCallbackError: If ``openid.signed`` is absent, empty or
            repeated on a non-cancel response, or any ``openid.*`` field
            is repeated
    """
    fields: dict[str, str] = {}
    for name, value in raw_query.items():
        if not name.startswith("openid."):
            continue
        single = _single_value(value)
        if single is None:
            raise MalformedCallbackError(f"Callback field {name} must have exactly one value")
        fields[name] = single

    if fields.get("openid.mode") != MODE_CANCEL and not fields.get("openid.signed"):
        raise MalformedCallbackError("Callback is missing a single openid.signed value")

    return CallbackParameters(fields=fields)


def build_verification_parameters(callback: CallbackParameters) -> dict[str, str]:
    """Derive the ``check_authentication`` form body from a callback.

    Starts from the fixed fields and copies every field named in
    ``openid.signed`` by value. Only names in ``SIGNABLE_FIELDS`` are
    copied, and a copy never replaces a fixed field.

    Args:
        callback: Parsed callback parameters

    Returns:
        Form fields to POST to the provider

    Raises:
        ValueError: If a fixed field or a signed field is missing, or a
            signed name is not a recognised assertion field
    """
    params: dict[str, str] = {}
    for name in _ECHOED_FIELDS:
        value = callback.get(name)
        if not value:
            raise ValueError(f"callback has no openid.{name}")
        params[f"openid.{name}"] = value
    params["openid.ns"] = OPENID_NS
    params["openid.mode"] = MODE_CHECK_AUTHENTICATION

    for name in callback.signed:
        if name not in SIGNABLE_FIELDS:
            raise ValueError(f"openid.signed lists unexpected field {name!r}")
        key = f"openid.{name}"
        if key in params:
            continue
        value = callback.get(name)
        if value is None:
            raise ValueError(f"signed field {key} is missing from the callback")
        params[key] = value

    return params
