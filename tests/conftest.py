"""Shared fixtures for NewsHub tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from newshub.config import NewsHubConfig
from newshub.data import AppState, Article, NewsPage
from newshub.render import (
    ArticleCard,
    EmptyState,
    ErrorBanner,
    PaginationView,
    Renderer,
    SkeletonCard,
)

NOW = datetime(2024, 1, 10, 12, 0, 0)


class MemoryDisplay:
    """Display that records what was shown, for assertions."""

    def __init__(self) -> None:
        self.cards: list[SkeletonCard] | list[ArticleCard] = []
        self.empty: EmptyState | None = None
        self.pagination: PaginationView | None = None
        self.pagination_visible = False
        self.error: ErrorBanner | None = None
        self.errors_shown: list[str] = []
        self.scrolls = 0
        self.opened: list[str] = []

    def show_cards(self, cards):
        self.cards = list(cards)
        self.empty = None

    def show_empty(self, empty):
        self.cards = []
        self.empty = empty

    def show_pagination(self, view):
        self.pagination = view
        self.pagination_visible = True

    def hide_pagination(self):
        self.pagination_visible = False

    def show_error(self, banner):
        self.error = banner
        self.errors_shown.append(banner.message)

    def hide_error(self):
        self.error = None

    def scroll_to_top(self):
        self.scrolls += 1

    def open_url(self, url):
        self.opened.append(url)


class FakeSource:
    """NewsSource returning a fixed page (or raising) and recording states."""

    def __init__(self, page: NewsPage | None = None, error: Exception | None = None) -> None:
        self.page = page if page is not None else NewsPage()
        self.error = error
        self.requests: list[AppState] = []

    async def fetch(self, state: AppState) -> NewsPage:
        self.requests.append(replace(state))
        if self.error is not None:
            raise self.error
        return self.page


def make_articles(count: int = 2) -> list[Article]:
    return [
        Article(
            title=f"Article {i}",
            description=f"Description {i}",
            url=f"https://example.com/{i}",
            image_url=f"https://example.com/{i}.jpg",
            source="example.com",
            published_at="2024-01-10T10:00:00",
        )
        for i in range(1, count + 1)
    ]


@pytest.fixture
def config() -> NewsHubConfig:
    return NewsHubConfig(api_key="test-key", error_display_seconds=0.01)


@pytest.fixture
def display() -> MemoryDisplay:
    return MemoryDisplay()


@pytest.fixture
def renderer(display: MemoryDisplay, config: NewsHubConfig) -> Renderer:
    return Renderer(
        display,
        page_size=config.articles_per_page,
        error_display_seconds=config.error_display_seconds,
        clock=lambda: NOW,
    )
