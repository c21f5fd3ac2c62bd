"""Pydantic configuration models for NewsHub."""

from pydantic import BaseModel, Field

API_KEY_PLACEHOLDER = "YOUR_API_KEY"
THENEWSAPI_BASE_URL = "https://api.thenewsapi.com/v1/news"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/400x200/e5e7eb/6b7280?text=No+Image"


def is_api_key_set(api_key: str | None) -> bool:
    """Whether ``api_key`` is a real token (not empty, not the placeholder)."""
    if not api_key:
        return False
    key = api_key.strip()
    return bool(key) and key != API_KEY_PLACEHOLDER


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for the per-session fetch log."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsHubConfig(BaseModel):
    """Root configuration for NewsHub."""

    api_key: str = API_KEY_PLACEHOLDER
    base_url: str = THENEWSAPI_BASE_URL
    articles_per_page: int = Field(default=10, ge=1, le=100)
    default_language: str = "en"
    default_category: str = ""
    error_display_seconds: float = Field(default=5.0, gt=0)
    placeholder_image_url: str = PLACEHOLDER_IMAGE_URL
    request_timeout: float = Field(default=30.0, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}

    @property
    def has_api_key(self) -> bool:
        """Whether a real token was supplied (not empty, not the placeholder)."""
        return is_api_key_set(self.api_key)
