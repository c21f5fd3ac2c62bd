"""NewsHub: a paginated, filterable client for TheNewsAPI."""

from newshub.config import LoggingConfig, NewsHubConfig, load_config
from newshub.controller import NewsController
from newshub.data import CATEGORIES, LANGUAGES, AppState, Article, LoadPhase, NewsPage
from newshub.errors import (
    ConfigurationError,
    HttpError,
    InvalidTransitionError,
    NetworkError,
    NewsHubError,
    RateLimitedError,
)
from newshub.render import (
    ArticleCard,
    Display,
    EmptyState,
    ErrorBanner,
    PaginationView,
    Renderer,
    SkeletonCard,
    format_relative_date,
)
from newshub.search import NewsSource, TheNewsAPIClient, build_params, select_endpoint
from newshub.session_logger import SessionLogger

__all__ = [
    # Models
    "CATEGORIES",
    "LANGUAGES",
    "AppState",
    "Article",
    "LoadPhase",
    "NewsPage",
    # Errors
    "ConfigurationError",
    "HttpError",
    "InvalidTransitionError",
    "NetworkError",
    "NewsHubError",
    "RateLimitedError",
    # Fetching
    "NewsSource",
    "TheNewsAPIClient",
    "build_params",
    "select_endpoint",
    # Rendering
    "ArticleCard",
    "Display",
    "EmptyState",
    "ErrorBanner",
    "PaginationView",
    "Renderer",
    "SkeletonCard",
    "format_relative_date",
    # Control
    "NewsController",
    # Logging
    "SessionLogger",
    # Config
    "LoggingConfig",
    "NewsHubConfig",
    "load_config",
]
