"""Plain-text Display for interactive terminal sessions."""

from __future__ import annotations

import sys
import textwrap
import webbrowser
from typing import TextIO

from newshub.render.views import (
    ArticleCard,
    EmptyState,
    ErrorBanner,
    PaginationView,
    SkeletonCard,
)

CLEAR_SCREEN = "\033[H\033[2J"


class TerminalDisplay:
    """Render view models as text on a stream.

    Output is append-only, so hiding the error banner or the pagination line
    cannot erase what was already written. Both are tracked in ``error`` and
    ``pagination`` instead, and the pagination line is only written after a
    page of cards.

    Args:
        stream: Output stream (defaults to stdout).
        width: Wrap width for descriptions.
    """

    def __init__(self, stream: TextIO | None = None, *, width: int = 88) -> None:
        self._stream = stream or sys.stdout
        self._width = width
        self.cards: list[ArticleCard] = []
        self.error: ErrorBanner | None = None
        self.pagination: PaginationView | None = None

    def _write(self, text: str = "") -> None:
        self._stream.write(text + "\n")
        self._stream.flush()

    def show_cards(self, cards: list[SkeletonCard] | list[ArticleCard]) -> None:
        articles = [c for c in cards if isinstance(c, ArticleCard)]
        self.cards = articles
        if not articles:
            self._write(f"Loading {len(cards)} articles...")
            return
        self._write()
        for i, card in enumerate(articles, 1):
            self._write(f"{i:>2}. {card.title}")
            for line in textwrap.wrap(card.description, width=self._width - 4):
                self._write(f"    {line}")
            self._write(f"    {card.source} · {card.date}")
            if card.url:
                self._write(f"    {card.url}")
            self._write()

    def show_empty(self, empty: EmptyState) -> None:
        self.cards = []
        self._write(f"\n{empty.icon} {empty.title}")
        self._write(f"   {empty.message}\n")

    def show_pagination(self, view: PaginationView) -> None:
        self.pagination = view
        prev = "" if view.prev_disabled else "[p]rev  "
        self._write(f"-- {view.label} --  {prev}[n]ext")

    def hide_pagination(self) -> None:
        self.pagination = None

    def show_error(self, banner: ErrorBanner) -> None:
        self.error = banner
        self._write(f"! {banner.message}")

    def hide_error(self) -> None:
        self.error = None

    def scroll_to_top(self) -> None:
        if self._stream.isatty():
            self._stream.write(CLEAR_SCREEN)
            self._stream.flush()

    def open_url(self, url: str) -> None:
        webbrowser.open_new_tab(url)
