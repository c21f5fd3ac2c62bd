"""Mapping from articles, errors and state to view models on a Display."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from newshub.config import PLACEHOLDER_IMAGE_URL
from newshub.data import AppState, Article
from newshub.render.formatting import format_relative_date
from newshub.render.views import (
    ArticleCard,
    Display,
    EmptyState,
    ErrorBanner,
    PaginationView,
    SkeletonCard,
)

logger = logging.getLogger(__name__)

NO_TITLE = "No title available"
NO_DESCRIPTION = "No description available"
UNKNOWN_SOURCE = "Unknown source"


def build_card(
    article: Article,
    *,
    now: datetime | None = None,
    placeholder_image_url: str = PLACEHOLDER_IMAGE_URL,
) -> ArticleCard:
    """Turn one article into a card, defaulting every missing field."""
    return ArticleCard(
        title=article.title or NO_TITLE,
        description=article.description or NO_DESCRIPTION,
        source=article.source or UNKNOWN_SOURCE,
        date=format_relative_date(article.published_at, now),
        image_url=article.image_url or placeholder_image_url,
        url=article.url,
    )


def build_pagination(state: AppState, total_pages: int | None = None) -> PaginationView:
    label = f"Page {state.current_page}"
    if total_pages:
        label = f"{label} of {total_pages}"
    return PaginationView(
        page=state.current_page,
        label=label,
        prev_disabled=state.current_page == 1,
    )


class Renderer:
    """Writes view models into a Display.

    Args:
        display: The presentation target.
        page_size: Number of skeleton cards shown while loading.
        error_display_seconds: Delay before an error banner clears itself.
        placeholder_image_url: Image used for articles without one.
        clock: Returns "now" for relative dates (defaults to UTC now).
    """

    def __init__(
        self,
        display: Display,
        *,
        page_size: int = 10,
        error_display_seconds: float = 5.0,
        placeholder_image_url: str = PLACEHOLDER_IMAGE_URL,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._display = display
        self._page_size = page_size
        self._error_display_seconds = error_display_seconds
        self._placeholder_image_url = placeholder_image_url
        self._clock = clock

    @property
    def display(self) -> Display:
        return self._display

    def render_loading(self) -> None:
        self._display.show_cards([SkeletonCard() for _ in range(self._page_size)])

    def render_empty(self) -> None:
        self._display.show_empty(EmptyState())
        self._display.hide_pagination()

    def render_articles(self, articles: Sequence[Article] | None) -> bool:
        """Render one card per article, or the empty state.

        Returns:
            True if cards were rendered, False if the empty state was shown.
        """
        if not articles:
            self.render_empty()
            return False

        now = self._clock() if self._clock else None
        cards = [
            build_card(a, now=now, placeholder_image_url=self._placeholder_image_url)
            for a in articles
        ]
        self._display.show_cards(cards)
        return True

    def render_pagination(self, state: AppState, *, total_pages: int | None = None) -> None:
        self._display.show_pagination(build_pagination(state, total_pages))

    def render_error(self, message: str) -> None:
        """Show ``message`` and hide it again after the configured delay.

        The timer runs on the current event loop and is never cancelled, so a
        later banner may be cleared early by an earlier timer.
        """
        self._display.show_error(ErrorBanner(message=message))
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; error banner will not self-clear")
            return
        loop.call_later(self._error_display_seconds, self._display.hide_error)

    def clear_error(self) -> None:
        self._display.hide_error()
