# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Test helpers shared across steam_auth test modules."""

from unittest.mock import AsyncMock, MagicMock

STEAM_ID = "76561197960287930"
RETURN_TO = "https://app.example/api/auth/callback/steam"

VALID_BODY = "ns:http://specs.openid.net/auth/2.0\nis_valid:true\n"
INVALID_BODY = "ns:http://specs.openid.net/auth/2.0\nis_valid:false\n"


def make_response(text: str = "", json_data=None, status_error: Exception | None = None) -> MagicMock:
    """Build a stand-in for an httpx.Response."""
    response = MagicMock()
    response.text = text
    response.json.return_value = json_data
    response.raise_for_status = MagicMock(side_effect=status_error)
    return response


def make_async_client(response=None, error: Exception | None = None) -> MagicMock:
    """Build a stand-in for the ``httpx.AsyncClient`` class.

    The returned mock is used as ``async with httpx.AsyncClient(...) as client``;
    ``client.get``/``client.post`` return ``response`` or raise ``error``.
    """
    if error is not None:
        request = AsyncMock(side_effect=error)
    else:
        request = AsyncMock(return_value=response)

    client = MagicMock()
    client.get = request
    client.post = request

    client_cls = MagicMock()
    client_cls.return_value.__aenter__ = AsyncMock(return_value=client)
    client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
    return client_cls


def make_login_client(post_response=None, get_response=None) -> tuple[MagicMock, MagicMock]:
    """Build one ``httpx.AsyncClient`` stand-in serving a whole login.

    The verifier and the profile resolver import the same ``httpx`` module,
    so a login sees a single patched ``AsyncClient``. ``post`` and ``get``
    are separate mocks so each step can be checked on its own.

    Returns:
        Tuple of (client class mock, client instance mock)
    """
    client = MagicMock()
    client.post = AsyncMock(return_value=post_response)
    client.get = AsyncMock(return_value=get_response)

    client_cls = MagicMock()
    client_cls.return_value.__aenter__ = AsyncMock(return_value=client)
    client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
    return client_cls, client
