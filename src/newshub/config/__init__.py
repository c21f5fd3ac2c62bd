"""Configuration module for NewsHub."""

from newshub.config.loader import API_KEY_ENV_VAR, get_default_config_path, load_config
from newshub.config.models import (
    API_KEY_PLACEHOLDER,
    PLACEHOLDER_IMAGE_URL,
    THENEWSAPI_BASE_URL,
    LoggingConfig,
    NewsHubConfig,
    is_api_key_set,
)

__all__ = [
    "API_KEY_ENV_VAR",
    "API_KEY_PLACEHOLDER",
    "PLACEHOLDER_IMAGE_URL",
    "THENEWSAPI_BASE_URL",
    "LoggingConfig",
    "NewsHubConfig",
    "get_default_config_path",
    "is_api_key_set",
    "load_config",
]
