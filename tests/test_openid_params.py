# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Tests for OpenID parameter building and callback parsing."""

from urllib.parse import parse_qs, urlsplit

import pytest

from steam_auth import (
    MalformedCallbackError,
    build_authorization_parameters,
    build_verification_parameters,
    parse_callback,
)
from steam_auth.openid_params import IDENTIFIER_SELECT, OPENID_NS

FIXED_KEYS = {"openid.assoc_handle", "openid.signed", "openid.sig", "openid.ns", "openid.mode"}


class TestBuildAuthorizationParameters:
    """Tests for the checkid_setup request."""

    def test_fixed_fields(self):
        """Test namespace, mode and identifier-select placeholders."""
        request = build_authorization_parameters(
            "https://app.example/api/callback", "https://app.example"
        )

        assert request.endpoint == "https://steamcommunity.com/openid/login"
        assert request.params["openid.ns"] == OPENID_NS
        assert request.params["openid.mode"] == "checkid_setup"
        assert request.params["openid.identity"] == IDENTIFIER_SELECT
        assert request.params["openid.claimed_id"] == IDENTIFIER_SELECT

    def test_url_carries_literal_return_to_and_realm(self):
        """Test the redirect URL decodes back to exactly the given URLs."""
        request = build_authorization_parameters(
            "https://app.example/api/callback", "https://app.example"
        )

        parts = urlsplit(request.url)
        query = parse_qs(parts.query)

        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://steamcommunity.com/openid/login"
        assert query["openid.return_to"] == ["https://app.example/api/callback"]
        assert query["openid.realm"] == ["https://app.example"]
        assert len(query) == 6

    def test_deterministic(self):
        """Test building twice yields equal requests."""
        first = build_authorization_parameters("https://a.example/cb", "https://a.example")
        second = build_authorization_parameters("https://a.example/cb", "https://a.example")

        assert first == second
        assert first.url == second.url

    def test_equal_requests_hash_equal(self):
        """Test requests can be used as set members and dict keys."""
        first = build_authorization_parameters("https://a.example/cb", "https://a.example")
        second = build_authorization_parameters("https://a.example/cb", "https://a.example")
        other = build_authorization_parameters("https://b.example/cb", "https://b.example")

        assert hash(first) == hash(second)
        assert len({first, second, other}) == 2

    def test_params_are_read_only(self):
        """Test the parameter mapping cannot be modified."""
        request = build_authorization_parameters("https://a.example/cb", "https://a.example")

        with pytest.raises(TypeError):
            request.params["openid.mode"] = "check_authentication"


class TestParseCallback:
    """Tests for callback shape checks."""

    def test_parses_plain_mapping(self, callback_query):
        """Test a normal Steam callback parses."""
        callback = parse_callback(callback_query)

        assert callback.mode == "id_res"
        assert callback.claimed_id == callback_query["openid.claimed_id"]
        assert callback.signed[0] == "signed"
        assert len(callback.signed) == 7

    def test_accepts_single_item_lists(self, callback_query):
        """Test parse_qs-style values with one item each are accepted."""
        callback = parse_callback({k: [v] for k, v in callback_query.items()})

        assert callback.get("sig") == callback_query["openid.sig"]

    def test_drops_non_openid_keys(self, callback_query):
        """Test unrelated query parameters are ignored."""
        callback_query["next"] = "/dashboard"

        callback = parse_callback(callback_query)

        assert "next" not in callback.fields

    def test_equal_callbacks_hash_equal(self, callback_query):
        """Test callbacks with the same fields are equal and hash alike."""
        first = parse_callback(callback_query)
        second = parse_callback(dict(callback_query))

        assert first == second
        assert hash(first) == hash(second)
        assert {first: "seen"}[second] == "seen"

    def test_missing_signed_raises(self, callback_query):
        """Test a callback without openid.signed is malformed."""
        del callback_query["openid.signed"]

        with pytest.raises(MalformedCallbackError):
            parse_callback(callback_query)

    def test_empty_signed_raises(self, callback_query):
        """Test an empty openid.signed is malformed."""
        callback_query["openid.signed"] = ""

        with pytest.raises(MalformedCallbackError):
            parse_callback(callback_query)

    def test_repeated_signed_raises(self, callback_query):
        """Test openid.signed given twice is malformed."""
        callback_query["openid.signed"] = ["claimed_id", "identity"]

        with pytest.raises(MalformedCallbackError):
            parse_callback(callback_query)

    def test_cancel_without_signed_is_accepted(self):
        """Test Steam's cancel redirect, which carries only ns and mode, parses."""
        callback = parse_callback({"openid.ns": OPENID_NS, "openid.mode": "cancel"})

        assert callback.mode == "cancel"
        assert callback.signed == ()

    def test_repeated_field_on_cancel_raises(self):
        """Test a cancel response is still checked for repeated fields."""
        with pytest.raises(MalformedCallbackError):
            parse_callback({"openid.ns": OPENID_NS, "openid.mode": ["cancel", "id_res"]})

    def test_repeated_other_field_raises(self, callback_query):
        """Test any repeated openid.* field is malformed."""
        callback_query["openid.claimed_id"] = [
            "https://steamcommunity.com/openid/id/76561197960287930",
            "https://steamcommunity.com/openid/id/76561197960287931",
        ]

        with pytest.raises(MalformedCallbackError):
            parse_callback(callback_query)

    def test_malformed_is_authentication_error(self):
        """Test shape failures are reported as authentication failures."""
        from steam_auth import AuthenticationError

        with pytest.raises(AuthenticationError) as exc_info:
            parse_callback({})

        assert exc_info.value.kind == "malformed_callback"


class TestBuildVerificationParameters:
    """Tests for the check_authentication form body."""

    def test_fixed_fields(self, callback_query):
        """Test mode is switched and echoed fields are copied."""
        form = build_verification_parameters(parse_callback(callback_query))

        assert form["openid.mode"] == "check_authentication"
        assert form["openid.ns"] == OPENID_NS
        assert form["openid.assoc_handle"] == callback_query["openid.assoc_handle"]
        assert form["openid.signed"] == callback_query["openid.signed"]
        assert form["openid.sig"] == callback_query["openid.sig"]

    @pytest.mark.parametrize(
        "signed",
        [
            "claimed_id",
            "claimed_id,identity",
            "op_endpoint,claimed_id,identity,return_to,response_nonce",
        ],
    )
    def test_one_field_per_signed_name(self, callback_query, signed):
        """Test exactly the signed fields are added beyond the fixed ones, copied verbatim."""
        callback_query["openid.signed"] = signed
        names = signed.split(",")

        form = build_verification_parameters(parse_callback(callback_query))

        extra = set(form) - FIXED_KEYS
        assert extra == {f"openid.{name}" for name in names}
        for name in names:
            assert form[f"openid.{name}"] == callback_query[f"openid.{name}"]

    def test_unsigned_fields_are_not_copied(self, callback_query):
        """Test fields outside the signed list stay out of the request."""
        callback_query["openid.signed"] = "claimed_id"

        form = build_verification_parameters(parse_callback(callback_query))

        assert "openid.return_to" not in form
        assert "openid.identity" not in form

    def test_signed_list_cannot_override_mode(self, callback_query):
        """Test a signed list naming mode is rejected instead of overwriting it."""
        callback_query["openid.signed"] = "mode,claimed_id"

        with pytest.raises(ValueError, match="unexpected field"):
            build_verification_parameters(parse_callback(callback_query))

    def test_unknown_signed_name_rejected(self, callback_query):
        """Test names outside the assertion field set are rejected."""
        callback_query["openid.signed"] = "claimed_id,sreg.email"

        with pytest.raises(ValueError):
            build_verification_parameters(parse_callback(callback_query))

    def test_missing_signed_field_rejected(self, callback_query):
        """Test a signed field absent from the callback is rejected."""
        del callback_query["openid.response_nonce"]

        with pytest.raises(ValueError, match="missing"):
            build_verification_parameters(parse_callback(callback_query))

    def test_missing_sig_rejected(self, callback_query):
        """Test a callback without openid.sig cannot be verified."""
        del callback_query["openid.sig"]

        with pytest.raises(ValueError):
            build_verification_parameters(parse_callback(callback_query))
