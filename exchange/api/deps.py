"""FastAPI dependency injection for bearer-token authentication."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from exchange.auth.jwks import JWKSPublisher
from exchange.auth.token_service import TokenService
from exchange.crypto.errors import TokenError
from exchange.crypto.types import AccessClaims, Scope

_security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    """Return the TokenService built at startup."""
    return request.app.state.token_service


def get_jwks_publisher(request: Request) -> JWKSPublisher:
    """Return the JWKSPublisher built at startup."""
    return request.app.state.jwks_publisher


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_access_claims(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(_security)
    ],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AccessClaims:
    """Verify the Bearer access token and return its claims."""
    if credentials is None:
        raise _unauthorized("Missing bearer token")
    try:
        return tokens.verify_access(credentials.credentials)
    except TokenError as exc:
        raise _unauthorized(str(exc)) from exc


def require_scope(
    scope: Scope,
) -> Callable[[AccessClaims], Awaitable[AccessClaims]]:
    """Build a dependency that requires the access token to grant a scope."""

    async def _check(
        claims: Annotated[AccessClaims, Depends(require_access_claims)],
    ) -> AccessClaims:
        if scope not in claims.scope:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Missing required scope: {scope}",
            )
        return claims

    return _check


require_admin = require_scope(Scope.ADMIN)
