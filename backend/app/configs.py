"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the calculator.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Catalog endpoint, paginated with ?page=<n>
    CATALOG_ENDPOINT: str = "http://shopicruit.myshopify.com/products.json"
    CATALOG_REQUEST_TIMEOUT: Optional[float] = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
