"""JWT creation and verification using RS256."""

from typing import Any

import jwt
from pydantic import BaseModel

from exchange.crypto.errors import (
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
    UnsupportedAlgorithmError,
)
from exchange.crypto.keys import load_private_key, load_public_key
from exchange.crypto.types import ISSUER, SIGNING_ALGORITHM, SIGNING_KID, KeyMaterial

REQUIRED_CLAIMS = ["exp", "iat", "iss", "sub"]


class JWTCodec:
    """Signs claims into compact JWS and verifies them back.

    Keys are parsed once; the instance holds no mutable state and may be
    shared across threads and tasks.
    """

    def __init__(self, key_material: KeyMaterial) -> None:
        self._private_key = load_private_key(key_material.private_key_pem)
        self._public_key = load_public_key(key_material.public_key_pem)

    def encode(self, claims: BaseModel) -> str:
        """Create a signed RS256 JWT carrying the given claims."""
        return jwt.encode(
            claims.model_dump(mode="json"),
            self._private_key,
            algorithm=SIGNING_ALGORITHM,
            headers={"kid": SIGNING_KID},
        )

    def decode(self, token: str) -> dict[str, Any]:
        """Verify and decode an RS256 JWT, returning the raw payload."""
        try:
            header = jwt.get_unverified_header(token)
        except jwt.DecodeError as exc:
            raise MalformedTokenError(f"Malformed token header: {exc}") from exc
        if header.get("alg") != SIGNING_ALGORITHM:
            raise UnsupportedAlgorithmError(
                f"Unsupported token algorithm: {header.get('alg')!r}"
            )

        try:
            return jwt.decode(
                token,
                self._public_key,
                algorithms=[SIGNING_ALGORITHM],
                issuer=ISSUER,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignatureError("Token signature is invalid") from exc
        except jwt.InvalidAlgorithmError as exc:
            raise UnsupportedAlgorithmError(str(exc)) from exc
        except (jwt.DecodeError, jwt.MissingRequiredClaimError) as exc:
            raise MalformedTokenError(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc)) from exc
