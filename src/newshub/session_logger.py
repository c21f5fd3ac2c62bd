"""Session logger for recording fetch cycles to a JSON file."""

import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from newshub.data import AppState, NewsPage

REDACTED_PARAMS = frozenset({"api_token"})


class CycleRecord(BaseModel):
    """Record of a single fetch cycle."""

    endpoint: str
    params: dict[str, Any]
    outcome: str
    article_count: int = 0
    found: int | None = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a complete interactive session."""

    session_id: str
    started_at: str
    completed_at: str | None = None
    cycles: list[CycleRecord] = []
    final_state: dict[str, Any] | None = None


def _public_params(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if k not in REDACTED_PARAMS}


class SessionLogger:
    """Accumulates fetch cycle records and writes one JSON log file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None
        if enabled:
            self._record = SessionRecord(
                session_id=str(uuid.uuid4()),
                started_at=datetime.now(tz=UTC).isoformat(),
            )

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    @property
    def cycles(self) -> list[CycleRecord]:
        return list(self._record.cycles) if self._record else []

    def log_cycle(
        self,
        endpoint: str,
        params: dict[str, Any],
        *,
        page: NewsPage | None = None,
        error: BaseException | None = None,
        duration_seconds: float = 0.0,
    ) -> None:
        """Append a cycle record; the API token is never recorded.

        Args:
            endpoint: Endpoint name (``"top"`` or ``"all"``).
            params: Query parameters that were sent.
            page: The fetched page on success.
            error: The failure on error.
            duration_seconds: Wall-clock time for the request.
        """
        if not self._enabled or self._record is None:
            return

        self._record.cycles.append(
            CycleRecord(
                endpoint=endpoint,
                params=_public_params(params),
                outcome="failed" if error is not None else "success",
                article_count=len(page.articles) if page is not None else 0,
                found=page.found if page is not None else None,
                error=str(error) if error is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish(self, state: AppState | None = None) -> Path | None:
        """Write the session record to a JSON file.

        Args:
            state: Final application state to include.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        if state is not None:
            self._record.final_state = {
                "current_page": state.current_page,
                "language": state.language,
                "category": state.category,
                "search_query": state.search_query,
                "phase": str(state.phase),
            }

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00.json
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"session_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
