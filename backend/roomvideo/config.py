"""Application configuration settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Room Video Service"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    ssl_certfile: str = "certificates/localhost.pem"
    ssl_keyfile: str = "certificates/localhost-key.pem"
    cors_origins: List[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./roomvideo.db"

    # JWT
    jwt_secret_key: str = "your-super-secret-jwt-key-change-this-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24  # 24 hours

    # Storage
    upload_dir: str = "./uploads"

    # File upload limits
    max_upload_size: int = 1024 * 1024 * 1024  # 1GB

    # Access policy
    video_visibility: Literal["all", "own"] = "all"  # "own": plain users only see their uploads
    stream_requires_auth: bool = False

    # Default supervisor account and sample rooms on an empty database
    seed_defaults: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
