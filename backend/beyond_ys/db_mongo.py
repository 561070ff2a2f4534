from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(__file__).resolve().parents[1] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # MongoDB Settings
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "beyond_ys"
    mongodb_max_pool_size: int = 10
    mongodb_min_pool_size: int = 1
    # multi-document transactions need a replica set
    mongodb_transactions: bool = True

    # Auth
    jwt_secret: str = "dev-secret-key-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Cache mirror
    cache_poll_interval: float = 30.0
    cache_max_age: float = 5.0

    site_url: str = "http://localhost:8000"
    log_level: str = "INFO"


settings = Settings()

# Global motor client
_client: AsyncIOMotorClient | None = None


def get_client() -> AsyncIOMotorClient:
    """Get or create the MongoDB client."""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            settings.mongodb_url,
            maxPoolSize=settings.mongodb_max_pool_size,
            minPoolSize=settings.mongodb_min_pool_size,
        )
    return _client


def get_database() -> AsyncIOMotorDatabase:
    return get_client()[settings.mongodb_db_name]


def get_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """Get database instance for dependency injection."""
    yield get_database()


async def close_db() -> None:
    """Close the MongoDB connection."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
