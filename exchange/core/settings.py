"""Application settings loaded from environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

JWT_EXPIRATION_HOURS_DEFAULT = 24
JWKS_SNAPSHOT_FILENAME = "public_keys.json"


class AuthSettings(BaseSettings):
    """JWT signing key and discovery settings."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_")

    private_key: str | None = None
    public_key: str | None = None
    # Not consulted: access and refresh lifetimes are fixed in TokenService.
    jwt_expiration_hours: int = JWT_EXPIRATION_HOURS_DEFAULT
    jwks_snapshot_path: Path = Path(JWKS_SNAPSHOT_FILENAME)
    log_level: str = "INFO"
