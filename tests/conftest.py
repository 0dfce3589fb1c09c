# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Shared fixtures for steam_auth tests."""

import pytest

from steam_auth import SteamAuthConfig
from steam_logging import SilentLogger

from .helpers import RETURN_TO, STEAM_ID


@pytest.fixture
def silent_logger():
    return SilentLogger()


@pytest.fixture
def config():
    return SteamAuthConfig(base_url="https://app.example", api_key="test-api-key", timeout_seconds=5)


@pytest.fixture
def callback_query():
    """Callback query exactly as Steam sends it after a successful sign-in."""
    return {
        "openid.ns": "http://specs.openid.net/auth/2.0",
        "openid.mode": "id_res",
        "openid.op_endpoint": "https://steamcommunity.com/openid/login",
        "openid.claimed_id": f"https://steamcommunity.com/openid/id/{STEAM_ID}",
        "openid.identity": f"https://steamcommunity.com/openid/id/{STEAM_ID}",
        "openid.return_to": RETURN_TO,
        "openid.response_nonce": "2025-01-01T00:00:00ZabcdEFGH",
        "openid.assoc_handle": "1234567890",
        "openid.signed": "signed,op_endpoint,claimed_id,identity,return_to,response_nonce,assoc_handle",
        "openid.sig": "c2lnbmF0dXJlLXZhbHVl",
    }


@pytest.fixture
def player_record():
    return {
        "steamid": STEAM_ID,
        "communityvisibilitystate": 3,
        "profilestate": 1,
        "personaname": "Test Player",
        "lastlogoff": 1700000000,
        "profileurl": f"https://steamcommunity.com/profiles/{STEAM_ID}/",
        "avatar": "https://avatars.example/abc.jpg",
        "avatarmedium": "https://avatars.example/abc_medium.jpg",
        "avatarfull": "https://avatars.example/abc_full.jpg",
    }
