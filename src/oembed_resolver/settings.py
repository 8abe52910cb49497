"""
Configuration for oembed-resolver with environment variable overrides.

Every field can be set through an ``OEMBED_``-prefixed environment variable,
e.g. ``OEMBED_REQUEST_TIMEOUT=10``.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .catalog import PROVIDERS_URL


class Settings(BaseSettings):
    """
    Application settings using Pydantic for validation
    and environment variable support.
    """

    # Catalog settings
    providers_url: str = Field(
        default=PROVIDERS_URL, description="URL of the public provider catalog"
    )

    catalog_path: Optional[Path] = Field(
        default=None, description="Local catalog file used instead of the bundled one"
    )

    # Transport settings
    request_timeout: int = Field(default=30, description="Request timeout in seconds")

    user_agent: str = Field(
        default="oembed-resolver", description="User-Agent header sent with requests"
    )

    max_workers: int = Field(
        default=4, description="Maximum number of parallel workers for batch fetches"
    )

    # General settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = {
        "env_prefix": "OEMBED_",
        "case_sensitive": False,
    }

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()
