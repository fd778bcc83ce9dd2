"""JWKS discovery and token introspection endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from exchange.api.deps import get_jwks_publisher, require_access_claims
from exchange.auth.jwks import JWKSPublisher
from exchange.crypto.types import AccessClaims, JWKSResponse

router = APIRouter()

JWKS_CACHE_CONTROL = "public, max-age=3600"


@router.get("/.well-known/jwks.json")
async def jwks(
    response: Response,
    publisher: Annotated[JWKSPublisher, Depends(get_jwks_publisher)],
) -> JWKSResponse:
    """JSON Web Key Set endpoint."""
    response.headers["Cache-Control"] = JWKS_CACHE_CONTROL
    return publisher.generate()


@router.get("/api/v1/auth/me")
async def me(
    claims: Annotated[AccessClaims, Depends(require_access_claims)],
) -> AccessClaims:
    """Return the verified claims of the caller's access token."""
    return claims
