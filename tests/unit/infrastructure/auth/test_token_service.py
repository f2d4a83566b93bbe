"""
Unit tests for the JWT token service.
"""

from datetime import timedelta

import pytest
from jose import jwt

from devbase.domain.models.base import ErrorKind, InvalidTokenError
from devbase.infrastructure.auth.jwt_handler import TokenService


ACCESS_SECRET = "test-access-secret"
REFRESH_SECRET = "test-refresh-secret"


class TestTokenService:

    def test_access_round_trip(self, token_service):
        token = token_service.sign_access("user-1")

        payload = token_service.verify_access(token)

        assert payload.sub == "user-1"
        assert payload.exp > payload.iat

    def test_refresh_round_trip(self, token_service):
        assert token_service.verify_refresh(token_service.sign_refresh("user-1")).sub == "user-1"

    def test_access_token_rejected_as_refresh(self, token_service):
        with pytest.raises(InvalidTokenError):
            token_service.verify_refresh(token_service.sign_access("user-1"))

    def test_refresh_token_rejected_as_access(self, token_service):
        with pytest.raises(InvalidTokenError):
            token_service.verify_access(token_service.sign_refresh("user-1"))

    def test_expired_token_has_same_error_kind_as_tampered(self):
        expired = TokenService(
            access_secret=ACCESS_SECRET,
            refresh_secret=REFRESH_SECRET,
            access_ttl=timedelta(seconds=-30),
        )
        token = expired.sign_access("user-1")
        tampered = token[:-2] + ("AA" if not token.endswith("AA") else "BB")

        with pytest.raises(InvalidTokenError) as expired_error:
            expired.verify_access(token)
        with pytest.raises(InvalidTokenError) as tampered_error:
            expired.verify_access(tampered)

        assert expired_error.value.kind == tampered_error.value.kind == ErrorKind.INVALID_TOKEN
        assert expired_error.value.message == tampered_error.value.message

    def test_zero_ttl_token_is_rejected_immediately(self):
        service = TokenService(
            access_secret=ACCESS_SECRET,
            refresh_secret=REFRESH_SECRET,
            access_ttl=timedelta(0),
            refresh_ttl=timedelta(0),
        )

        with pytest.raises(InvalidTokenError):
            service.verify_access(service.sign_access("user-1"))
        with pytest.raises(InvalidTokenError):
            service.verify_refresh(service.sign_refresh("user-1"))

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, token_service, token):
        with pytest.raises(InvalidTokenError):
            token_service.verify_access(token)

    def test_token_without_subject(self, token_service):
        token = jwt.encode({"exp": 9999999999}, ACCESS_SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            token_service.verify_access(token)

    def test_tokens_signed_at_different_instants_differ(self, token_service):
        first = token_service.sign_access("user-1")
        second = token_service.sign_access("user-1")

        assert first != second
        assert token_service.verify_access(second).iat > token_service.verify_access(first).iat

    @pytest.mark.parametrize("access, refresh", [("", "x"), ("x", ""), ("same", "same")])
    def test_secrets_must_be_present_and_distinct(self, access, refresh):
        with pytest.raises(ValueError):
            TokenService(access_secret=access, refresh_secret=refresh)
