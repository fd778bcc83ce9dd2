"""JSON Web Key Set publication for the signing key."""

from exchange.crypto.keys import build_jwks
from exchange.crypto.types import JWKSResponse


class JWKSPublisher:
    """Exposes the public verification key as a JWKS."""

    def __init__(self, public_key_pem: str) -> None:
        self._public_key_pem = public_key_pem

    def generate(self) -> JWKSResponse:
        """Build the single-entry JWKS for the signing key."""
        return build_jwks(self._public_key_pem)
