"""Client for TheNewsAPI ``/top`` and ``/all`` endpoints."""

from __future__ import annotations

import logging
from typing import Literal

import httpx

from newshub.config import THENEWSAPI_BASE_URL, is_api_key_set
from newshub.data import AppState, NewsPage
from newshub.errors import ConfigurationError, HttpError, NetworkError, RateLimitedError

logger = logging.getLogger(__name__)

Endpoint = Literal["all", "top"]


def select_endpoint(state: AppState) -> Endpoint:
    """Use ``all`` when searching or filtering by category, ``top`` otherwise."""
    if state.search_query or state.category:
        return "all"
    return "top"


def build_params(state: AppState, *, api_key: str, limit: int) -> dict[str, str | int]:
    """Build the query string parameters for ``state``."""
    params: dict[str, str | int] = {
        "api_token": api_key,
        "limit": limit,
        "page": state.current_page,
        "language": state.language,
    }
    if state.search_query:
        params["search"] = state.search_query
    if state.category:
        params["categories"] = state.category
    return params


class TheNewsAPIClient:
    """Fetch pages of articles from TheNewsAPI.

    One request per call: no retry, no cancellation.

    Args:
        api_key: TheNewsAPI token.
        base_url: Endpoint root, without the trailing ``/top`` or ``/all``.
        limit: Articles per page.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = THENEWSAPI_BASE_URL,
        limit: int = 10,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not is_api_key_set(api_key):
            raise ConfigurationError("TheNewsAPI key required. Set api_key or THENEWSAPI_KEY.")
        self._api_key = api_key.strip()
        self._base_url = base_url.rstrip("/")
        self._limit = limit
        self._timeout = timeout
        self._transport = transport

    def build_url(self, state: AppState) -> str:
        return f"{self._base_url}/{select_endpoint(state)}"

    async def fetch(self, state: AppState) -> NewsPage:
        """Fetch the page described by ``state``.

        Args:
            state: Current application state.

        Returns:
            Parsed page of articles.
        """
        url = self.build_url(state)
        params = build_params(state, api_key=self._api_key, limit=self._limit)
        logger.debug(f"GET {url} page={state.current_page} language={state.language}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"API Error: {e}")
            raise NetworkError() from e

        if response.status_code == 429:
            logger.warning("API Error: rate limited")
            raise RateLimitedError()
        if not response.is_success:
            logger.warning(f"API Error: HTTP {response.status_code}")
            raise HttpError(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(f"API Error: invalid JSON body ({e})")
            raise NetworkError() from e

        try:
            return NewsPage.from_api(body)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"API Error: unexpected response shape ({e})")
            raise NetworkError() from e
