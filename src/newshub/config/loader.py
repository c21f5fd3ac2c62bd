"""YAML configuration loading utilities."""

import os
from pathlib import Path

import yaml

from newshub.config.models import API_KEY_PLACEHOLDER, NewsHubConfig

API_KEY_ENV_VAR = "THENEWSAPI_KEY"


def load_config(path: Path | str | None = None) -> NewsHubConfig:
    """Load configuration from a YAML file.

    The ``THENEWSAPI_KEY`` environment variable fills in the API key when the
    file leaves it out or still holds the placeholder.

    Args:
        path: Path to YAML config file. ``None`` uses built-in defaults only.

    Returns:
        Validated NewsHubConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        with path.open() as f:
            raw = yaml.safe_load(f) or {}

    env_key = os.environ.get(API_KEY_ENV_VAR)
    if env_key and raw.get("api_key") in (None, "", API_KEY_PLACEHOLDER):
        raw["api_key"] = env_key

    return NewsHubConfig.model_validate(raw)


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
