"""
Configuration management using Pydantic Settings.

Loads runtime configuration from environment variables and an optional .env
file. Provides type-safe access to:
- FRED API key
- FRED API base URL
- HTTP request timeout
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.stlouisfed.org/fred/"


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        FRED_API_KEY: API key for the FRED web service
        FRED_BASE_URL: Override of the API base URL (e.g., a proxy or mock)
        FRED_REQUEST_TIMEOUT: Timeout in seconds for a single HTTP request

    Attributes:
        fred_api_key: FRED API key (None if not configured)
        fred_base_url: API base URL, always ending with '/'
        fred_request_timeout: Request timeout in seconds, None for no timeout

    Example:
        >>> config = get_app_config()
        >>> config.fred_base_url
        'https://api.stlouisfed.org/fred/'
    """

    fred_api_key: Optional[str] = Field(
        default=None,
        description="FRED API key, see https://fred.stlouisfed.org/docs/api/api_key.html"
    )

    fred_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL that endpoint paths are appended to"
    )

    fred_request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Timeout in seconds for one HTTP request (None: wait indefinitely)"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('fred_base_url')
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are relative, so the base URL must end with '/'."""
        return v if v.endswith('/') else v + '/'


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    Cached after first access.

    Returns:
        Singleton AppConfig instance

    Example:
        >>> config = get_app_config()
        >>> config2 = get_app_config()
        >>> config is config2  # Same instance
        True
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached config so the next get_app_config() reloads it."""
    global _app_config
    _app_config = None
