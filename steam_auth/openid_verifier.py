# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Server-to-server verification of Steam OpenID 2.0 assertions.

The browser hands us whatever the provider redirected it with, so nothing
in the callback is trusted until the provider confirms it through a
``check_authentication`` request made directly from this server.
"""

import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import httpx

from steam_logging import Logger, create_logger

from .models import CallbackParameters, SyntheticCredential, VerificationResult
from .openid_params import (
    MODE_CANCEL,
    STEAM_OPENID_ENDPOINT,
    build_verification_parameters,
)
from .provider import InvalidAssertionError, VerificationError

_IS_VALID_TRUE = re.compile(r"is_valid\s*:\s*true", re.IGNORECASE)
_IS_VALID_FALSE = re.compile(r"is_valid\s*:\s*false", re.IGNORECASE)


def claimed_id_pattern(provider_domain: str) -> re.Pattern:
    """Compile the claimed_id pattern for a provider domain.

    Steam claimed ids look like ``https://steamcommunity.com/openid/id/<steamid64>``.
    """
    return re.compile(rf"^https://{re.escape(provider_domain)}/openid/id/([0-9]{{17,25}})$")


def body_reports_valid(body: str) -> bool:
    """Return True when a check_authentication body says ``is_valid:true`` and nothing contradicts it."""
    return bool(_IS_VALID_TRUE.search(body)) and not _IS_VALID_FALSE.search(body)


def _without_query(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path, "", ""))


class OpenIDAssertionVerifier:
    """Verifies callback assertions with the provider and extracts the SteamID.

    A rejection by the provider is a normal negative result; only transport
    failures raise. Every call builds its own request, so one instance can
    serve concurrent logins.

    Attributes:
        endpoint: Provider OpenID endpoint for check_authentication
        provider_domain: Domain expected in verified claimed_id URLs
        timeout: Seconds allowed for the verification round trip
        expected_return_to: When set, callbacks must echo this return_to
    """

    def __init__(
        self,
        endpoint: str = STEAM_OPENID_ENDPOINT,
        provider_domain: str = "steamcommunity.com",
        timeout: float = 10.0,
        expected_return_to: Optional[str] = None,
        logger: Optional[Logger] = None,
    ):
        self.endpoint = endpoint
        self.provider_domain = provider_domain
        self.timeout = timeout
        self.expected_return_to = expected_return_to
        self._claimed_id_re = claimed_id_pattern(provider_domain)
        self._logger = logger or create_logger(name="steam_auth.verifier")

    def _precheck(self, callback: CallbackParameters) -> tuple[Optional[dict[str, str]], Optional[VerificationResult]]:
        """Build the verification form, or an invalid result if there is nothing to verify."""
        if callback.mode == MODE_CANCEL:
            self._logger.info("User cancelled login at provider")
            return None, VerificationResult.invalid("cancelled")

        if "claimed_id" not in callback.signed:
            self._logger.warning("Assertion does not sign claimed_id", signed=callback.get("signed"))
            return None, VerificationResult.invalid("unsigned_claimed_id")

        if self.expected_return_to:
            returned = callback.get("return_to") or ""
            if _without_query(returned) != _without_query(self.expected_return_to):
                self._logger.warning("Callback return_to does not match this host", return_to=returned)
                return None, VerificationResult.invalid("return_to_mismatch")

        try:
            form = build_verification_parameters(callback)
        except ValueError as e:
            self._logger.warning("Assertion cannot be verified", error=str(e))
            return None, VerificationResult.invalid("unverifiable")

        return form, None

    def _interpret(self, callback: CallbackParameters, body: str) -> VerificationResult:
        if not body_reports_valid(body):
            self._logger.warning("Provider rejected assertion")
            return VerificationResult.invalid("rejected")

        steam_id = self.extract_steam_id(callback.claimed_id)
        if steam_id is None:
            self._logger.warning(
                "Provider accepted assertion but claimed_id is unusable",
                claimed_id=callback.claimed_id,
            )
            return VerificationResult.invalid("bad_claimed_id")

        self._logger.info("Assertion verified", steam_id=steam_id)
        return VerificationResult(is_valid=True, steam_id=steam_id)

    def extract_steam_id(self, claimed_id: Optional[str]) -> Optional[str]:
        """Return the 17-25 digit SteamID in ``claimed_id`` or None."""
        if not claimed_id:
            return None
        match = self._claimed_id_re.match(claimed_id)
        if not match or not match.group(1):
            return None
        return match.group(1)

    def verify(self, callback: CallbackParameters) -> VerificationResult:
        """Confirm a callback assertion with the provider.

        Args:
            callback: Parsed callback parameters

        Returns:
            VerificationResult, carrying the SteamID when valid

        Raises:
            VerificationError: If the provider cannot be reached, times out,
                or answers with a non-success status
        """
        form, early = self._precheck(callback)
        if early is not None:
            return early

        try:
            response = httpx.post(self.endpoint, data=form, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error("check_authentication request failed", error=str(e))
            raise VerificationError(f"OpenID verification request failed: {e}") from e

        return self._interpret(callback, response.text)

    async def averify(self, callback: CallbackParameters) -> VerificationResult:
        """Asynchronous ``verify``; cancelling the awaiting task aborts the request."""
        form, early = self._precheck(callback)
        if early is not None:
            return early

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.endpoint, data=form)
                response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error("check_authentication request failed", error=str(e))
            raise VerificationError(f"OpenID verification request failed: {e}") from e

        return self._interpret(callback, response.text)

    @staticmethod
    def credential_for(result: VerificationResult) -> SyntheticCredential:
        """Mint a credential for a verified result.

        Raises:
            InvalidAssertionError: If the result carries no identifier
        """
        if not result.has_identifier:
            raise InvalidAssertionError(f"Invalid Steam login ({result.reason or 'no identifier'})")
        return SyntheticCredential(steam_id=result.steam_id)

    def issue_credential(self, callback: CallbackParameters) -> SyntheticCredential:
        """Verify a callback and mint the synthetic credential for it.

        Raises:
            InvalidAssertionError: If the assertion is rejected or carries no usable identifier
            VerificationError: If the provider cannot be reached
        """
        return self.credential_for(self.verify(callback))

    async def aissue_credential(self, callback: CallbackParameters) -> SyntheticCredential:
        return self.credential_for(await self.averify(callback))
