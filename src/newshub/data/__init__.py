"""Data models for NewsHub."""

from newshub.data.models import CATEGORIES, LANGUAGES, AppState, Article, LoadPhase, NewsPage

__all__ = [
    "CATEGORIES",
    "LANGUAGES",
    "AppState",
    "Article",
    "LoadPhase",
    "NewsPage",
]
