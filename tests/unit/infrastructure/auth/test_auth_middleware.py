"""
Unit tests for bearer authentication.
"""

import pytest

from devbase.domain.models.principal import Principal
from devbase.infrastructure.web.middleware.auth_middleware import (
    INVALID_FORMAT,
    INVALID_TOKEN,
    MISSING_HEADER,
    authenticate,
)
from devbase.infrastructure.web.middleware.error_handler import UnauthorizedException


class TestAuthenticate:

    def test_valid_token_yields_principal(self, token_service):
        token = token_service.sign_access("user-1")

        assert authenticate(f"Bearer {token}", token_service) == Principal(id="user-1")

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, token_service, header):
        with pytest.raises(UnauthorizedException) as exc_info:
            authenticate(header, token_service)

        assert exc_info.value.message == MISSING_HEADER
        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    @pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer a b", "bearer abc", "Bearer "])
    def test_bad_format(self, token_service, header):
        with pytest.raises(UnauthorizedException) as exc_info:
            authenticate(header, token_service)

        assert exc_info.value.message == INVALID_FORMAT

    def test_refresh_token_is_not_accepted(self, token_service):
        with pytest.raises(UnauthorizedException) as exc_info:
            authenticate(f"Bearer {token_service.sign_refresh('user-1')}", token_service)

        assert exc_info.value.message == INVALID_TOKEN
        assert exc_info.value.error_code == "UNAUTHORIZED"
