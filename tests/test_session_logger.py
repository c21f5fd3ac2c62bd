"""Tests for SessionLogger."""

import json
from pathlib import Path

from conftest import make_articles

from newshub.data import AppState, LoadPhase, NewsPage
from newshub.errors import HttpError
from newshub.session_logger import SessionLogger


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    session_logger = SessionLogger(tmp_path / "logs", enabled=False)
    session_logger.log_cycle("top", {"page": 1}, page=NewsPage())
    assert session_logger.cycles == []
    assert session_logger.finish(AppState()) is None
    assert not (tmp_path / "logs").exists()
    assert session_logger.last_log_path is None


def test_log_cycle_success(tmp_path: Path) -> None:
    session_logger = SessionLogger(tmp_path)
    page = NewsPage(articles=make_articles(3), found=120)
    session_logger.log_cycle(
        "top",
        {"api_token": "secret", "page": 1, "language": "en"},
        page=page,
        duration_seconds=0.123456,
    )
    [cycle] = session_logger.cycles
    assert cycle.endpoint == "top"
    assert cycle.outcome == "success"
    assert cycle.article_count == 3
    assert cycle.found == 120
    assert cycle.params == {"page": 1, "language": "en"}
    assert cycle.duration_seconds == 0.1235
    assert cycle.timestamp


def test_log_cycle_failure(tmp_path: Path) -> None:
    session_logger = SessionLogger(tmp_path)
    session_logger.log_cycle("all", {"search": "x"}, error=HttpError(500))
    [cycle] = session_logger.cycles
    assert cycle.outcome == "failed"
    assert cycle.error == "HTTP error! status: 500"
    assert cycle.article_count == 0


def test_finish_writes_json(tmp_path: Path) -> None:
    log_dir = tmp_path / "nested" / "logs"
    session_logger = SessionLogger(log_dir)
    session_logger.log_cycle("top", {"api_token": "secret", "page": 2}, page=NewsPage())
    state = AppState(current_page=2, search_query="mars", phase=LoadPhase.SUCCESS)

    path = session_logger.finish(state)

    assert path is not None
    assert path.parent == log_dir
    assert path.name.startswith("session_")
    assert path.suffix == ".json"
    assert session_logger.last_log_path == path

    text = path.read_text()
    assert "secret" not in text
    data = json.loads(text)
    assert data["session_id"]
    assert data["completed_at"]
    assert len(data["cycles"]) == 1
    assert data["final_state"] == {
        "current_page": 2,
        "language": "en",
        "category": "",
        "search_query": "mars",
        "phase": "success",
    }
