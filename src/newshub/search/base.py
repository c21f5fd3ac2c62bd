from __future__ import annotations

from typing import Protocol

from newshub.data import AppState, NewsPage


class NewsSource(Protocol):
    """Interface for fetching one page of news for the current state."""

    async def fetch(self, state: AppState) -> NewsPage:
        """Fetch the page described by ``state``.

        Args:
            state: Current application state (page, language, category, search).

        Returns:
            The parsed page; an empty page when the API returned no articles.

        Raises:
            RateLimitedError: The API answered with HTTP 429.
            HttpError: The API answered with another non-2xx status.
            NetworkError: The request failed or the body was not JSON.
        """
        ...
