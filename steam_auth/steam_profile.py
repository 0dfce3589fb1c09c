# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Steam Web API profile lookup.

Resolves a verified SteamID into a player summary. Every login fetches
fresh data; names and avatars change between logins.
"""

from typing import Any, Optional

import httpx

from steam_logging import Logger, create_logger

from .models import SteamProfile
from .provider import MissingIdentifierError, ProfileFetchError, ProfileNotFoundError

PLAYER_SUMMARIES_PATH = "/ISteamUser/GetPlayerSummaries/v0002/"


class SteamProfileResolver:
    """Fetches player summaries from the Steam Web API.

    Attributes:
        api_base_url: Base URL for the Steam Web API
        timeout: Seconds allowed for the lookup
    """

    def __init__(
        self,
        api_key: str,
        api_base_url: str = "https://api.steampowered.com",
        timeout: float = 10.0,
        logger: Optional[Logger] = None,
    ):
        if not api_key:
            raise ValueError("api_key is required for Steam profile lookups")
        self._api_key = api_key
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._logger = logger or create_logger(name="steam_auth.profile")

    @property
    def url(self) -> str:
        return f"{self.api_base_url}{PLAYER_SUMMARIES_PATH}"

    def _query(self, steam_id: str) -> dict[str, str]:
        if not steam_id:
            raise MissingIdentifierError("Steam ID not provided")
        return {"key": self._api_key, "steamids": steam_id}

    def _select(self, steam_id: str, payload: Any) -> SteamProfile:
        try:
            players = payload["response"]["players"]
        except (KeyError, TypeError) as e:
            raise ProfileFetchError("Steam player summaries response has no response.players") from e

        if not isinstance(players, list):
            raise ProfileFetchError("Steam player summaries response.players is not a list")

        record = next(
            (p for p in players if isinstance(p, dict) and str(p.get("steamid")) == steam_id),
            None,
        )
        if record is None:
            self._logger.warning("Steam player not found", steam_id=steam_id, returned=len(players))
            raise ProfileNotFoundError("Steam player information not found")

        try:
            profile = SteamProfile.from_dict(record)
        except KeyError as e:
            raise ProfileFetchError(f"Steam player record is missing {e}") from e

        self._logger.info("Fetched Steam profile", steam_id=steam_id)
        return profile

    def fetch_profile(self, steam_id: str) -> SteamProfile:
        """Fetch the player summary for a verified SteamID.

        Args:
            steam_id: SteamID emitted by assertion verification

        Returns:
            SteamProfile for the player

        Raises:
            MissingIdentifierError: If steam_id is empty
            ProfileNotFoundError: If the API returns no record for steam_id
            ProfileFetchError: If the API is unavailable or the body is not
                the expected JSON
        """
        params = self._query(steam_id)
        # httpx error text embeds the request URL, which carries the API key
        try:
            response = httpx.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            self._logger.error("Steam profile request failed", steam_id=steam_id, error=type(e).__name__)
            raise ProfileFetchError(f"Steam profile request failed: {type(e).__name__}") from e
        except ValueError as e:
            raise ProfileFetchError("Steam profile response is not valid JSON") from e

        return self._select(steam_id, payload)

    async def afetch_profile(self, steam_id: str) -> SteamProfile:
        """Asynchronous ``fetch_profile``; cancellation aborts the request."""
        params = self._query(steam_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            self._logger.error("Steam profile request failed", steam_id=steam_id, error=type(e).__name__)
            raise ProfileFetchError(f"Steam profile request failed: {type(e).__name__}") from e
        except ValueError as e:
            raise ProfileFetchError("Steam profile response is not valid JSON") from e

        return self._select(steam_id, payload)
