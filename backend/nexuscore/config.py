"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The connection string comes from the environment (MONGO_URI), never code
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults for every non-secret setting; a local mongod works out of the box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    mongo_uri: str = "mongodb://localhost:27017/nexuscore"
    mongo_database: str = "nexuscore"
    mongo_server_selection_timeout_ms: int = 5000

    @field_validator("mongo_uri")
    @classmethod
    def require_mongo_scheme(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGO_URI must start with mongodb:// or mongodb+srv://")
        return v

    # API
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_headers: list[str] = ["Content-Type"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
