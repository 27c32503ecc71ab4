"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Catalog sync settings loaded from environment variables."""

    # Catalog endpoint
    products_url: str = Field(
        default="https://homework.mocart.io/api/products",
        description="Endpoint returning the product catalog",
    )
    # None means the fetch waits indefinitely
    fetch_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Optional fetch timeout in seconds",
    )

    # Scene
    slot_count: int = Field(
        default=3,
        ge=0,
        description="Number of pre-placed display slots",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
