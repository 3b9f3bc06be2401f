"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Catalog browser settings loaded from environment variables."""

    # Remote catalog API
    api_base_url: str = Field(
        default="https://dummyjson.com",
        description="Product catalog API base URL",
    )
    api_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds",
    )

    # Pagination
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Number of products requested per list page",
    )
    search_limit: int = Field(
        default=12,
        ge=1,
        description="Number of products requested per search page",
    )
    similar_limit: int = Field(
        default=8,
        ge=0,
        description="Maximum number of similar products shown on a detail view",
    )

    # Scroll restoration
    scroll_settle_delay: float = Field(
        default=0.05,
        ge=0,
        description="Delay in seconds after the last frame-aligned scroll attempt",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    model_config = {
        "env_prefix": "CATALOG_",
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance.

    Returns:
        Settings loaded from the environment.
    """
    return Settings()


settings = get_settings()
