"""
Application configuration settings.
Handles environment variables and application-wide settings.
"""
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application settings
    app_name: str = Field(default="Storefront API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    app_description: str = Field(
        default="Storefront backend: catalog, checkout, reviews, contact messages and admin back-office",
        description="OpenAPI description",
    )
    debug: bool = Field(default=False)

    # Server settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=True)

    # Database settings
    mongodb_url: str = Field(default="mongodb://localhost:27017")
    database_name: str = Field(default="ecommerce")

    # MongoDB connection settings
    mongodb_server_selection_timeout_ms: int = Field(default=5000)
    mongodb_connect_timeout_ms: int = Field(default=5000)
    mongodb_socket_timeout_ms: int = Field(default=30000)
    mongodb_max_pool_size: int = Field(default=10)
    mongodb_min_pool_size: int = Field(default=1)
    mongodb_retry_writes: bool = Field(default=True)

    # Logging settings
    log_level: str = Field(default="INFO")

    # API settings
    api_prefix: str = Field(default="/api")
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ]
    )

    # Auth settings
    jwt_secret: str = Field(default="your-secret-key")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_days: int = Field(default=7, ge=1)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)
    google_client_id: Optional[str] = Field(default=None)
    seed_default_admins: bool = Field(default=True)

    # Pagination defaults
    default_page_size: int = Field(default=20)
    max_page_size: int = Field(default=100)

    # Business logic settings
    max_order_items: int = Field(default=50)
    max_item_quantity: int = Field(default=100)


@lru_cache()
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
