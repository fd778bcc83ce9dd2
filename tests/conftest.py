"""Shared test fixtures for the exchange auth service."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from exchange.auth.token_service import TokenService
from exchange.core.app import create_app
from exchange.core.settings import AuthSettings
from exchange.crypto.jwt_codec import JWTCodec
from exchange.crypto.keys import generate_rsa_keypair
from exchange.crypto.types import KeyMaterial


@pytest.fixture(autouse=True)
def _isolate_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep JWKS snapshots out of the repository and ignore host env."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "EXCHANGE_PRIVATE_KEY",
        "EXCHANGE_PUBLIC_KEY",
        "EXCHANGE_JWT_EXPIRATION_HOURS",
        "EXCHANGE_JWKS_SNAPSHOT_PATH",
        "EXCHANGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def key_material() -> KeyMaterial:
    """One RSA keypair shared across the session."""
    return generate_rsa_keypair()


@pytest.fixture
def codec(key_material: KeyMaterial) -> JWTCodec:
    return JWTCodec(key_material)


@pytest.fixture
def token_service(codec: JWTCodec) -> TokenService:
    return TokenService(codec)


@pytest.fixture
async def client(key_material: KeyMaterial) -> AsyncIterator[AsyncClient]:
    """Create an httpx test client for an app signing with key_material."""
    app = create_app(AuthSettings(private_key=key_material.private_key_pem))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
