#!/usr/bin/env python
"""Interactive command-line client for NewsHub."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from newshub.config import NewsHubConfig, get_default_config_path, load_config
from newshub.controller import NewsController
from newshub.data import CATEGORIES, LANGUAGES
from newshub.errors import ConfigurationError
from newshub.render import Renderer
from newshub.render.terminal import TerminalDisplay
from newshub.search import TheNewsAPIClient
from newshub.session_logger import SessionLogger

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  search <text>    search articles (empty text clears the search)
  lang <code>      change language
  cat <name|all>   filter by category
  next, n          next page
  prev, p          previous page
  open <N>         open article N in the browser
  help             show this help
  quit, q          exit"""


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path | None = None
    language: str | None = None
    category: str | None = None
    search: str = ""
    log: bool = False
    log_dir: str | None = None
    verbose: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("category")
    @classmethod
    def category_must_be_known(cls, v: str | None) -> str | None:
        if v and v not in CATEGORIES:
            raise ValueError(f"Unknown category: {v} (choose from {', '.join(CATEGORIES)})")
        return v


def build_controller(
    config: NewsHubConfig,
    display: TerminalDisplay,
    *,
    session_logger: SessionLogger | None = None,
) -> NewsController:
    """Wire the API client, renderer and display into a controller.

    A missing API key leaves the controller without a source; ``start`` then
    shows the configuration error.
    """
    source: TheNewsAPIClient | None = None
    try:
        source = TheNewsAPIClient(
            api_key=config.api_key,
            base_url=config.base_url,
            limit=config.articles_per_page,
            timeout=config.request_timeout,
        )
    except ConfigurationError as e:
        logger.debug(f"API client not created: {e}")

    renderer = Renderer(
        display,
        page_size=config.articles_per_page,
        error_display_seconds=config.error_display_seconds,
        placeholder_image_url=config.placeholder_image_url,
    )
    return NewsController(config, source, renderer, session_logger=session_logger)


def parse_command(line: str) -> tuple[str, str]:
    """Split an input line into a lower-cased command and its argument text."""
    line = line.strip()
    if not line:
        return ("", "")
    head, _, rest = line.partition(" ")
    return (head.lower(), rest.strip())


class CommandLoop:
    """Reads commands and dispatches them to the controller as tasks.

    Dispatching without awaiting keeps the prompt responsive while a page is
    loading; the controller drops actions that arrive mid-load.
    """

    def __init__(self, controller: NewsController, display: TerminalDisplay) -> None:
        self._controller = controller
        self._display = display
        self._tasks: set[asyncio.Task] = set()

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Command failed: {error!r}", exc_info=error)

    def dispatch(self, line: str) -> bool:
        """Handle one input line. Returns False when the user asked to quit."""
        command, arg = parse_command(line)
        controller = self._controller

        if command in ("quit", "q", "exit"):
            return False
        if command == "":
            return True
        if command == "help":
            print(HELP_TEXT)
        elif command == "search":
            self._spawn(controller.handle_search(arg))
        elif command == "lang":
            if arg not in LANGUAGES:
                print(f"Unknown language: {arg!r} (choose from {', '.join(sorted(LANGUAGES))})")
            else:
                self._spawn(controller.handle_language_change(arg))
        elif command == "cat":
            category = "" if arg in ("", "all") else arg
            if category and category not in CATEGORIES:
                print(f"Unknown category: {arg!r} (choose from all, {', '.join(CATEGORIES)})")
            else:
                self._spawn(controller.handle_category_change(category))
        elif command in ("next", "n"):
            self._spawn(controller.handle_next_page())
        elif command in ("prev", "p"):
            self._spawn(controller.handle_prev_page())
        elif command == "open":
            self._open(arg)
        else:
            print(f"Unknown command: {command!r}. Type 'help' for commands.")
        return True

    def _open(self, arg: str) -> None:
        try:
            index = int(arg)
        except ValueError:
            print("Usage: open <N>")
            return
        cards = self._display.cards
        if not 1 <= index <= len(cards):
            print(f"No article {index} on this page")
            return
        if not self._controller.open_article(cards[index - 1].url):
            print("This article has no link")

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def run(self) -> None:
        while True:
            try:
                line = await asyncio.to_thread(input, "> ")
            except EOFError:
                break
            if not self.dispatch(line):
                break
        await self.drain()


async def run(args: CLIArgs) -> None:
    """Start a session with the given arguments.

    Args:
        args: Validated CLI arguments.
    """
    config_path = args.config
    if config_path is None and get_default_config_path().exists():
        config_path = get_default_config_path()
    config = load_config(config_path)

    log_enabled = args.log or config.logging.enabled
    log_dir = Path(args.log_dir if args.log_dir is not None else config.logging.log_dir)
    session_logger = SessionLogger(log_dir, enabled=log_enabled) if log_enabled else None

    display = TerminalDisplay()
    controller = build_controller(config, display, session_logger=session_logger)
    if args.language:
        controller.state.language = args.language
    if args.category:
        controller.state.category = args.category
    controller.state.search_query = args.search.strip()

    logger.info(f"Config: {config_path or 'built-in defaults'}")
    if not await controller.start():
        return

    print("Type 'help' for commands.")
    await CommandLoop(controller, display).run()

    if session_logger is not None:
        path = session_logger.finish(controller.state)
        if path:
            logger.info(f"\nSession log written to: {path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse news from TheNewsAPI.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument("--language", "-l", help="Language code, e.g. en, fr, de")
    parser.add_argument("--category", help="Category filter, e.g. tech, sports")
    parser.add_argument("--search", "-s", default="", help="Initial search text")
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON log of fetch cycles",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for session logs (default: from config, logs/)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    ns = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO, format="%(message)s")

    try:
        args = CLIArgs(
            config=ns.config,
            language=ns.language,
            category=ns.category,
            search=ns.search,
            log=ns.log,
            log_dir=ns.log_dir,
            verbose=ns.verbose,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
