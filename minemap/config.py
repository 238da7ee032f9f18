"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MINEMAP"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./minemap.db"
    seed_sample_data: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Backing-store client (used by the catalog session)
    api_base_url: str = "http://localhost:8000/api/deposits"
    request_timeout: float = 10.0

    # Initial map viewport, in pixels
    viewport_width: int = 960
    viewport_height: int = 540


settings = Settings()
