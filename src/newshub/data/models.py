"""Core data models for NewsHub."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from newshub.errors import InvalidTransitionError

CATEGORIES: tuple[str, ...] = (
    "general",
    "science",
    "sports",
    "business",
    "health",
    "entertainment",
    "tech",
    "politics",
    "food",
    "travel",
)

LANGUAGES: dict[str, str] = {
    "ar": "Arabic",
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "he": "Hebrew",
    "it": "Italian",
    "nl": "Dutch",
    "no": "Norwegian",
    "pt": "Portuguese",
    "ru": "Russian",
    "sv": "Swedish",
    "zh": "Chinese",
}


class LoadPhase(StrEnum):
    """Phase of the current fetch cycle."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


_TRANSITIONS: dict[LoadPhase, frozenset[LoadPhase]] = {
    LoadPhase.IDLE: frozenset({LoadPhase.LOADING}),
    LoadPhase.LOADING: frozenset({LoadPhase.SUCCESS, LoadPhase.FAILED}),
    LoadPhase.SUCCESS: frozenset({LoadPhase.LOADING}),
    LoadPhase.FAILED: frozenset({LoadPhase.LOADING}),
}


@dataclass
class AppState:
    """Mutable session state owned by the controller.

    Changing the search text, language or category resets ``current_page``
    to 1; the controller applies that policy, not this class.
    """

    current_page: int = 1
    language: str = "en"
    category: str = ""
    search_query: str = ""
    phase: LoadPhase = LoadPhase.IDLE

    @property
    def is_loading(self) -> bool:
        return self.phase is LoadPhase.LOADING

    def transition(self, target: LoadPhase) -> None:
        """Move to ``target``, rejecting transitions the cycle does not allow."""
        if target not in _TRANSITIONS[self.phase]:
            msg = f"Cannot move from {self.phase} to {target}"
            raise InvalidTransitionError(msg)
        self.phase = target


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Article:
    """A news article as returned by the API.

    Every field is optional: the renderer supplies fallbacks.
    """

    uuid: str | None = None
    title: str | None = None
    description: str | None = None
    snippet: str | None = None
    url: str | None = None
    image_url: str | None = None
    source: str | None = None
    published_at: str | None = None
    language: str | None = None
    categories: tuple[str, ...] = ()
    keywords: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> Article:
        """Build an article from one record of the API's ``data`` list."""
        categories = item.get("categories") or ()
        if isinstance(categories, str):
            categories = (categories,)
        elif not isinstance(categories, list | tuple):
            categories = ()
        return cls(
            uuid=_text(item.get("uuid")),
            title=_text(item.get("title")),
            description=_text(item.get("description")),
            snippet=_text(item.get("snippet")),
            url=_text(item.get("url")),
            image_url=_text(item.get("image_url")),
            source=_text(item.get("source")),
            published_at=_text(item.get("published_at")),
            language=_text(item.get("language")),
            categories=tuple(str(c) for c in categories),
            keywords=_text(item.get("keywords")),
        )


@dataclass(frozen=True)
class NewsPage:
    """One page of results plus whatever pagination metadata the API sent."""

    articles: list[Article] = field(default_factory=list)
    found: int | None = None
    limit: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.articles

    @property
    def total_pages(self) -> int | None:
        if self.found is None or not self.limit:
            return None
        return math.ceil(self.found / self.limit)

    @classmethod
    def from_api(cls, body: Any) -> NewsPage:
        """Parse a response body; a body without a ``data`` list is an empty page."""
        if not isinstance(body, dict):
            return cls()
        data = body.get("data")
        if not isinstance(data, list):
            data = []
        articles = [Article.from_api(item) for item in data if isinstance(item, dict)]
        meta = body.get("meta") if isinstance(body.get("meta"), dict) else {}
        return cls(
            articles=articles,
            found=_int_or_none(meta.get("found")),
            limit=_int_or_none(meta.get("limit")),
        )


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
