"""Controller translating user intents into fetch cycles."""

from __future__ import annotations

import logging
import time

from newshub.config import NewsHubConfig
from newshub.data import AppState, LoadPhase, NewsPage
from newshub.errors import DEFAULT_ERROR_MESSAGE, NewsHubError
from newshub.render import Renderer
from newshub.search import NewsSource, build_params, select_endpoint
from newshub.session_logger import SessionLogger

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = (
    "Please configure your API key in the config file or the THENEWSAPI_KEY environment variable"
)


class NewsController:
    """Owns the application state and runs one fetch cycle per user action.

    Every intent returns True when it ran a fetch cycle and False when it was
    dropped (a load is already in flight) or had nothing to do.

    Args:
        config: Application configuration.
        source: Where pages of news come from.
        renderer: Where results are drawn.
        state: Initial state; built from the config defaults when omitted.
        session_logger: Optional recorder of fetch cycles.
    """

    def __init__(
        self,
        config: NewsHubConfig,
        source: NewsSource | None,
        renderer: Renderer,
        *,
        state: AppState | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        self._config = config
        self._source = source
        self._renderer = renderer
        self._session_logger = session_logger
        self.state = state or AppState(
            language=config.default_language,
            category=config.default_category,
        )

    @property
    def ready(self) -> bool:
        return self._source is not None and self._config.has_api_key

    async def start(self) -> bool:
        """Run the initial load, or show the configuration error if no key is set."""
        if not self.ready:
            logger.error(CONFIG_ERROR_MESSAGE)
            self._renderer.render_error(CONFIG_ERROR_MESSAGE)
            self._renderer.render_empty()
            return False
        return await self.load_news()

    async def load_news(self) -> bool:
        """Run one fetch cycle for the current state.

        Dropped without side effects while another cycle is loading.
        """
        if self.state.is_loading:
            logger.debug("Load already in progress; dropping request")
            return False
        if self._source is None:
            return False

        self.state.transition(LoadPhase.LOADING)
        self._renderer.render_loading()
        self._renderer.clear_error()

        endpoint = select_endpoint(self.state)
        params = build_params(
            self.state, api_key=self._config.api_key, limit=self._config.articles_per_page
        )
        start = time.monotonic()
        try:
            page = await self._source.fetch(self.state)
        except NewsHubError as e:
            self._log_cycle(endpoint, params, error=e, start=start)
            self._renderer.render_error(e.user_message)
            self._renderer.render_empty()
            self.state.transition(LoadPhase.FAILED)
            return True
        except Exception as e:
            logger.exception("Unexpected error while loading news")
            self._log_cycle(endpoint, params, error=e, start=start)
            self._renderer.render_error(DEFAULT_ERROR_MESSAGE)
            self._renderer.render_empty()
            self.state.transition(LoadPhase.FAILED)
            return True

        self._log_cycle(endpoint, params, page=page, start=start)
        if self._renderer.render_articles(page.articles):
            self._renderer.render_pagination(self.state, total_pages=page.total_pages)
        logger.info(f"Loaded {len(page.articles)} articles (page {self.state.current_page})")
        self.state.transition(LoadPhase.SUCCESS)
        return True

    async def handle_search(self, text: str) -> bool:
        if self.state.is_loading:
            return False
        self.state.search_query = text.strip()
        self.state.current_page = 1
        return await self.load_news()

    async def handle_language_change(self, language: str) -> bool:
        if self.state.is_loading:
            return False
        self.state.language = language
        self.state.current_page = 1
        return await self.load_news()

    async def handle_category_change(self, category: str) -> bool:
        if self.state.is_loading:
            return False
        self.state.category = category
        self.state.current_page = 1
        return await self.load_news()

    async def handle_prev_page(self) -> bool:
        if self.state.is_loading or self.state.current_page <= 1:
            return False
        self.state.current_page -= 1
        return await self._load_and_scroll()

    async def handle_next_page(self) -> bool:
        if self.state.is_loading:
            return False
        self.state.current_page += 1
        return await self._load_and_scroll()

    def open_article(self, url: str | None) -> bool:
        if not url or url == "#":
            return False
        self._renderer.display.open_url(url)
        return True

    async def _load_and_scroll(self) -> bool:
        ran = await self.load_news()
        if ran and self.state.phase is LoadPhase.SUCCESS:
            self._renderer.display.scroll_to_top()
        return ran

    def _log_cycle(
        self,
        endpoint: str,
        params: dict[str, str | int],
        *,
        start: float,
        page: NewsPage | None = None,
        error: BaseException | None = None,
    ) -> None:
        if self._session_logger is None:
            return
        self._session_logger.log_cycle(
            endpoint,
            params,
            page=page,
            error=error,
            duration_seconds=time.monotonic() - start,
        )
