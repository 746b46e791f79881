"""Merchant Service Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    cors_origins: list[str] = ["*"]

    # Document store. No URL means an in-process mongomock store.
    database_url: Optional[str] = None
    database_name: str = "storefront"
    products_collection: str = "products"

    # Catalog listing
    default_page_size: int = 12
    max_page_size: int = 100

    # Session provider
    admin_session_token: Optional[str] = None
    admin_email: str = "admin@storefront.local"

    @property
    def uses_mongomock(self) -> bool:
        """True when no real MongoDB is configured"""
        return not self.database_url


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
