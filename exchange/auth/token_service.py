"""Access and refresh token issuance, verification, and scope checks."""

import uuid
import warnings
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta

from pydantic import ValidationError

from exchange.crypto.errors import InvalidTokenError, MalformedTokenError
from exchange.crypto.jwt_codec import JWTCodec
from exchange.crypto.types import (
    AccessClaims,
    RefreshClaims,
    Scope,
    TokenPair,
    TokenType,
)

ACCESS_TOKEN_TTL = timedelta(minutes=15)
REFRESH_TOKEN_TTL = timedelta(days=30)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TokenService:
    """Mints and verifies the two token shapes over a JWTCodec.

    Stateless: nothing about issued tokens is stored, so a refresh token
    stays valid until it expires.

    ``clock`` only sets ``iat``/``exp`` when minting. Verification checks
    ``exp`` against the system wall clock through PyJWT.
    """

    def __init__(self, codec: JWTCodec, clock: Clock | None = None) -> None:
        self._codec = codec
        self._clock = clock or _utc_now

    def _now(self) -> int:
        return int(self._clock().timestamp())

    def mint_access(
        self, user_id: uuid.UUID, email: str, scopes: Iterable[Scope]
    ) -> str:
        """Create a 15 minute access token carrying the given scopes."""
        iat = self._now()
        claims = AccessClaims(
            sub=str(user_id),
            email=email,
            iat=iat,
            exp=iat + int(ACCESS_TOKEN_TTL.total_seconds()),
            scope=list(dict.fromkeys(scopes)),
        )
        return self._codec.encode(claims)

    def mint_refresh(self, user_id: uuid.UUID, email: str) -> str:
        """Create a 30 day refresh token with a fresh jti and no scopes."""
        iat = self._now()
        claims = RefreshClaims(
            sub=str(user_id),
            email=email,
            iat=iat,
            exp=iat + int(REFRESH_TOKEN_TTL.total_seconds()),
            jti=str(uuid.uuid4()),
        )
        return self._codec.encode(claims)

    def mint_pair(
        self, user_id: uuid.UUID, email: str, scopes: Iterable[Scope]
    ) -> TokenPair:
        """Create an access and refresh token for the same user."""
        return TokenPair(
            access=self.mint_access(user_id, email, scopes),
            refresh=self.mint_refresh(user_id, email),
        )

    def verify_access(self, token: str) -> AccessClaims:
        """Verify a token and require it to be an access token."""
        raw = self._codec.decode(token)
        if raw.get("token_type") != TokenType.ACCESS:
            raise InvalidTokenError("Token is not an access token")
        try:
            return AccessClaims.model_validate(raw)
        except ValidationError as exc:
            raise MalformedTokenError(f"Invalid access token claims: {exc}") from exc

    def verify_refresh(self, token: str) -> RefreshClaims:
        """Verify a token and require it to be a refresh token."""
        raw = self._codec.decode(token)
        if raw.get("token_type") != TokenType.REFRESH:
            raise InvalidTokenError("Token is not a refresh token")
        try:
            return RefreshClaims.model_validate(raw)
        except ValidationError as exc:
            raise MalformedTokenError(f"Invalid refresh token claims: {exc}") from exc

    def verify_token(self, token: str) -> AccessClaims:
        """Deprecated alias of verify_access."""
        warnings.warn(
            "verify_token is deprecated; use verify_access or verify_refresh",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.verify_access(token)

    def refresh_access(self, refresh_token: str, scopes: Iterable[Scope]) -> str:
        """Exchange a refresh token for a new access token.

        The refresh token carries no scopes; the caller supplies the scopes
        the user currently holds.
        """
        claims = self.verify_refresh(refresh_token)
        try:
            user_id = uuid.UUID(claims.sub)
        except ValueError as exc:
            raise InvalidTokenError("Refresh token subject is not a UUID") from exc
        return self.mint_access(user_id, claims.email, scopes)

    def has_scope(self, token: str, required: Scope) -> bool:
        """Check whether a valid access token grants a scope."""
        return required in self.verify_access(token).scope

    def has_admin_scope(self, token: str) -> bool:
        """Check whether a valid access token grants the Admin scope."""
        return self.has_scope(token, Scope.ADMIN)
