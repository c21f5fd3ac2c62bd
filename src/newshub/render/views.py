"""View models handed to a Display, and the Display interface itself."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SkeletonCard:
    """Placeholder card shown while a page is loading."""

    text_lines: int = 3


@dataclass(frozen=True)
class ArticleCard:
    """A rendered article, every field already defaulted and formatted."""

    title: str
    description: str
    source: str
    date: str
    image_url: str
    url: str | None = None


@dataclass(frozen=True)
class EmptyState:
    icon: str = "📰"
    title: str = "No articles found"
    message: str = "Try adjusting your search or filters"


@dataclass(frozen=True)
class ErrorBanner:
    message: str


@dataclass(frozen=True)
class PaginationView:
    page: int
    label: str
    prev_disabled: bool


class Display(Protocol):
    """The presentation boundary.

    ``show_cards`` and ``show_empty`` replace the whole content of the single
    article container; nothing is diffed.
    """

    def show_cards(self, cards: list[SkeletonCard] | list[ArticleCard]) -> None: ...

    def show_empty(self, empty: EmptyState) -> None: ...

    def show_pagination(self, view: PaginationView) -> None: ...

    def hide_pagination(self) -> None: ...

    def show_error(self, banner: ErrorBanner) -> None: ...

    def hide_error(self) -> None: ...

    def scroll_to_top(self) -> None: ...

    def open_url(self, url: str) -> None: ...
