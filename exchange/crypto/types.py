"""Type definitions for key material, JWKS, and JWT claims."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

SIGNING_KID = "exchange_api_key_1"
SIGNING_ALGORITHM = "RS256"
ISSUER = "exchange_api"


class Scope(StrEnum):
    """Capability asserted inside an access token."""

    ADMIN = "Admin"
    USER = "User"
    BACKOFFICE = "Backoffice"


class TokenType(StrEnum):
    """Type tag carried in the token_type claim."""

    ACCESS = "Access"
    REFRESH = "Refresh"


class KeyMaterial(BaseModel):
    """An RSA keypair for JWT signing, PEM encoded."""

    model_config = ConfigDict(frozen=True)

    private_key_pem: str
    public_key_pem: str


class JWKEntry(BaseModel):
    """Single JWK entry in a JWKS response."""

    kty: str = "RSA"
    kid: str = SIGNING_KID
    use: str = "sig"
    alg: str = SIGNING_ALGORITHM
    n: str
    e: str


class JWKSResponse(BaseModel):
    """JSON Web Key Set response."""

    keys: list[JWKEntry] = Field(min_length=1)


class AccessClaims(BaseModel):
    """Claims of a short-lived access token."""

    sub: str
    email: str
    exp: int
    iat: int
    iss: str = ISSUER
    token_type: TokenType = TokenType.ACCESS
    scope: list[Scope] = Field(default_factory=list)


class RefreshClaims(BaseModel):
    """Claims of a long-lived refresh token."""

    sub: str
    email: str
    exp: int
    iat: int
    iss: str = ISSUER
    token_type: TokenType = TokenType.REFRESH
    jti: str


class TokenPair(BaseModel):
    """Access and refresh tokens minted together."""

    access: str
    refresh: str
