from newshub.render.formatting import format_absolute_date, format_relative_date, parse_timestamp
from newshub.render.renderer import (
    NO_DESCRIPTION,
    NO_TITLE,
    UNKNOWN_SOURCE,
    Renderer,
    build_card,
    build_pagination,
)
from newshub.render.views import (
    ArticleCard,
    Display,
    EmptyState,
    ErrorBanner,
    PaginationView,
    SkeletonCard,
)

__all__ = [
    "NO_DESCRIPTION",
    "NO_TITLE",
    "UNKNOWN_SOURCE",
    "ArticleCard",
    "Display",
    "EmptyState",
    "ErrorBanner",
    "PaginationView",
    "Renderer",
    "SkeletonCard",
    "build_card",
    "build_pagination",
    "format_absolute_date",
    "format_relative_date",
    "parse_timestamp",
]
