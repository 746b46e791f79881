"""Shopper Configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Shopper settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Merchant Configuration
    merchant_base_url: str = "http://localhost:8001"
    request_timeout: float = 30.0

    # Product page
    placeholder_image: str = "/placeholder.svg"
    low_stock_threshold: int = 5


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
