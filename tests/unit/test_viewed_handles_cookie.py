"""
Unit tests for the signed viewed-handles cookie codec.
"""
import pytest
from fastapi import Response
from jose import jwt

from storefront_discovery.core.constants.history import (
    HISTORY_COOKIE_MAX_AGE,
    HISTORY_COOKIE_NAME,
    MAX_COOKIE_VALUE_BYTES,
    MAX_HANDLE_LENGTH,
    MAX_VIEWED_HANDLES,
)
from storefront_discovery.utils.viewed_handles_cookie import ViewedHandlesCookie


pytestmark = pytest.mark.unit


class TestEncodeDecode:

    def test_round_trip(self, cookie_codec):
        handles = ["shirt", "hat", "boots"]
        assert cookie_codec.decode(cookie_codec.encode(handles)) == handles

    def test_empty_list_round_trip(self, cookie_codec):
        assert cookie_codec.decode(cookie_codec.encode([])) == []

    def test_token_is_signed_jwt(self, cookie_codec):
        token = cookie_codec.encode(["shirt"])
        assert jwt.get_unverified_header(token)["alg"] == "HS256"
        assert jwt.decode(token, "test-secret", algorithms=["HS256"]) == {"handles": ["shirt"]}

    def test_token_is_cookie_safe(self, cookie_codec):
        token = cookie_codec.encode(["a-very/odd+handle", "ünïcode"])
        assert "=" not in token
        assert ";" not in token
        assert token.isascii()

    def test_non_string_items_dropped(self, cookie_codec):
        token = cookie_codec.encode(["ok", 3, None])
        assert cookie_codec.decode(token) == ["ok"]


class TestRejection:

    @pytest.mark.parametrize("token", [
        None,
        "",
        "no-dot-here",
        ".sig-only",
        "garbage.garbage",
        "a.b.c",
        "é.abc",
        "abc.é",
        "é.é.é",
    ])
    def test_malformed_tokens_yield_empty(self, cookie_codec, token):
        assert cookie_codec.decode(token) == []

    def test_tampered_payload_rejected(self, cookie_codec):
        header, _, signature = cookie_codec.encode(["shirt"]).split(".")
        forged_claims = jwt.encode({"handles": ["shirt", "stolen"]}, "attacker").split(".")[1]
        assert cookie_codec.decode(f"{header}.{forged_claims}.{signature}") == []

    def test_tampered_signature_rejected(self, cookie_codec):
        header, claims, signature = cookie_codec.encode(["shirt"]).split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
        assert cookie_codec.decode(f"{header}.{claims}.{flipped}") == []

    def test_other_secret_rejected(self, cookie_codec):
        other = ViewedHandlesCookie(secrets=["someone-else"])
        assert cookie_codec.decode(other.encode(["shirt"])) == []

    def test_unsigned_token_rejected(self, cookie_codec):
        header = "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0"  # {"alg":"none","typ":"JWT"}
        claims = cookie_codec.encode(["shirt"]).split(".")[1]
        assert cookie_codec.decode(f"{header}.{claims}.") == []

    @pytest.mark.parametrize("claims", [{"handles": {"x": 1}}, {"handles": "x"}, {"other": ["x"]}])
    def test_signed_unexpected_claims_rejected(self, claims):
        codec = ViewedHandlesCookie(secrets=["s"])
        assert codec.decode(jwt.encode(claims, "s", algorithm="HS256")) == []


class TestSecretRotation:

    def test_old_secret_still_verifies(self):
        old = ViewedHandlesCookie(secrets=["old"])
        rotated = ViewedHandlesCookie(secrets=["new", "old"])
        assert rotated.decode(old.encode(["shirt"])) == ["shirt"]

    def test_first_secret_signs(self):
        rotated = ViewedHandlesCookie(secrets=["new", "old"])
        new_only = ViewedHandlesCookie(secrets=["new"])
        assert new_only.decode(rotated.encode(["shirt"])) == ["shirt"]

    def test_requires_a_secret(self):
        with pytest.raises(ValueError):
            ViewedHandlesCookie(secrets=[])


class TestFit:

    def test_typical_history_unchanged(self, cookie_codec):
        handles = [f"product-handle-{i}" for i in range(MAX_VIEWED_HANDLES)]
        assert cookie_codec.fit(handles) == handles

    def test_long_handles_trimmed_from_oldest(self, cookie_codec):
        handles = [f"{i:03d}-" + "x" * (MAX_HANDLE_LENGTH - 4) for i in range(MAX_VIEWED_HANDLES)]

        kept = cookie_codec.fit(handles)

        assert 0 < len(kept) < len(handles)
        assert kept == handles[: len(kept)]
        assert len(cookie_codec.encode(kept)) <= MAX_COOKIE_VALUE_BYTES
        assert len(cookie_codec.encode(handles[: len(kept) + 1])) > MAX_COOKIE_VALUE_BYTES

    def test_empty(self, cookie_codec):
        assert cookie_codec.fit([]) == []


class TestWrite:

    def test_cookie_attributes(self):
        codec = ViewedHandlesCookie(secrets=["s"], secure=True)
        response = Response()
        codec.write(response, ["shirt"])

        header = response.headers["set-cookie"]
        assert header.startswith(f"{HISTORY_COOKIE_NAME}=")
        assert f"Max-Age={HISTORY_COOKIE_MAX_AGE}" in header
        assert "HttpOnly" in header
        assert "Secure" in header
        assert "SameSite=lax" in header
        assert "Path=/" in header

    def test_insecure_cookie_for_local_development(self, cookie_codec):
        response = Response()
        cookie_codec.write(response, ["shirt"])
        assert "Secure" not in response.headers["set-cookie"]
