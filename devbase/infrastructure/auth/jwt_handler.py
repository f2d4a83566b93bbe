"""
JWT token service.
Signs and verifies access and refresh tokens, each class with its own secret.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, Any

from jose import JWTError, jwt as jose_jwt

from devbase.config import Settings
from devbase.domain.models.base import InvalidTokenError, utcnow

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_TTL = timedelta(minutes=15)
DEFAULT_REFRESH_TTL = timedelta(days=7)


@dataclass(frozen=True)
class TokenPayload:
    """Verified claims of a token."""

    sub: str
    iat: float
    exp: int


class TokenService:
    """
    Issues and verifies the two token classes.

    Payload contract for both: ``{"sub": user_id, "iat": ..., "exp": ...}``.
    Secrets are fixed at construction and only read afterwards, so a single
    instance can be shared by all requests.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = DEFAULT_ACCESS_TTL,
        refresh_ttl: timedelta = DEFAULT_REFRESH_TTL,
        algorithm: str = "HS256"
    ):
        if not access_secret or not refresh_secret:
            raise ValueError("Both access and refresh secrets are required")
        if access_secret == refresh_secret:
            raise ValueError("Access and refresh secrets must be distinct")

        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            access_secret=settings.jwt_access_secret,
            refresh_secret=settings.jwt_refresh_secret,
            access_ttl=settings.access_token_ttl,
            refresh_ttl=settings.refresh_token_ttl,
            algorithm=settings.jwt_algorithm,
        )

    def sign_access(self, user_id: str) -> str:
        """Sign a short-lived access token for ``user_id``."""
        return self._sign(user_id, self._access_secret, self.access_ttl)

    def sign_refresh(self, user_id: str) -> str:
        """Sign a long-lived refresh token for ``user_id``."""
        return self._sign(user_id, self._refresh_secret, self.refresh_ttl)

    def verify_access(self, token: str) -> TokenPayload:
        """
        Verify an access token.

        Raises:
            InvalidTokenError: On bad signature, malformed token, missing claims or expiry
        """
        return self._verify(token, self._access_secret)

    def verify_refresh(self, token: str) -> TokenPayload:
        """
        Verify a refresh token.

        Raises:
            InvalidTokenError: On bad signature, malformed token, missing claims or expiry
        """
        return self._verify(token, self._refresh_secret)

    def _sign(self, user_id: str, secret: str, ttl: timedelta) -> str:
        issued_at = utcnow()
        payload: Dict[str, Any] = {
            "sub": str(user_id),
            # Sub-second precision so tokens signed at different instants differ
            "iat": issued_at.timestamp(),
            "exp": int((issued_at + ttl).timestamp()),
        }
        return jose_jwt.encode(payload, secret, algorithm=self.algorithm)

    def _verify(self, token: str, secret: str) -> TokenPayload:
        # Expired and tampered tokens raise the same error
        try:
            claims = jose_jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            logger.debug("Token verification failed: %s", type(e).__name__)
            raise InvalidTokenError()

        # Tokens expire at exp, not one second after it
        if claims["exp"] <= utcnow().timestamp():
            raise InvalidTokenError()

        sub = claims.get("sub")
        if not isinstance(sub, str) or not sub:
            raise InvalidTokenError()

        return TokenPayload(sub=sub, iat=claims.get("iat", 0), exp=claims["exp"])
