"""FastAPI application factory for the exchange auth service."""

import logging

from fastapi import FastAPI

from exchange.api.routes_auth import router as auth_router
from exchange.auth.jwks import JWKSPublisher
from exchange.auth.token_service import TokenService
from exchange.core.settings import AuthSettings
from exchange.crypto.jwt_codec import JWTCodec
from exchange.crypto.keys import resolve_key_material


def create_app(settings: AuthSettings | None = None) -> FastAPI:
    """Build the application; key material is resolved before it is returned."""
    settings = settings or AuthSettings()
    logging.basicConfig(level=settings.log_level.upper())

    key_material = resolve_key_material(settings)

    app = FastAPI(
        title="Exchange API Auth",
        version="0.1.0",
    )
    app.state.token_service = TokenService(JWTCodec(key_material))
    app.state.jwks_publisher = JWKSPublisher(key_material.public_key_pem)

    app.include_router(auth_router)

    return app
