"""
Log source client: reads the integration backend's system and exception log files
(/api/logs/*) and normalizes each raw line into a LogEntry.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

import requests
from pydantic import ValidationError

from sync_manager.core.config import get_settings
from sync_manager.core.exceptions import LogSourceError
from sync_manager.schemas.common import LogFilter
from sync_manager.schemas.log_entry import LogEntry, LogSource, LogStats, RawLogRecord

logger = logging.getLogger(__name__)

NO_MESSAGE = "No message available"
DOWNLOAD_CHUNK_SIZE = 64 * 1024

_DEFAULT_LEVEL = {
    LogSource.SYSTEM: "info",
    LogSource.EXCEPTIONS: "error",
}


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC. None if unparseable."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_record(record: RawLogRecord, source: LogSource) -> LogEntry:
    """Translate one raw backend line into a LogEntry, filling every default."""
    return LogEntry(
        id=uuid.uuid4().hex,
        timestamp=parse_timestamp(record.timestamp) or datetime.now(timezone.utc),
        level=(record.level or "").strip().lower() or _DEFAULT_LEVEL[source],
        source=source.value,
        message=record.message or record.raw or NO_MESSAGE,
        details=record.raw,
    )


def filter_log_entries(entries: list[LogEntry], log_filter: LogFilter) -> list[LogEntry]:
    return [e for e in entries if log_filter.matches(e.level, e.message, e.source)]


class LogSourceService:
    """
    Client for the backend's log endpoints. Every call fully succeeds or raises LogSourceError.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.resolved_logs_base_url).rstrip("/")
        self._timeout = timeout or settings.request_timeout_seconds

    def _url(self, path: str) -> str:
        return f"{self._base_url}/api/logs/{path.lstrip('/')}"

    def _get(self, path: str, *, stream: bool = False) -> requests.Response:
        url = self._url(path)
        logger.info("GET %s", url)
        try:
            resp = requests.request("GET", url, timeout=self._timeout, stream=stream)
        except requests.RequestException as e:
            raise LogSourceError(f"Network error: {e!s}", cause=e) from e
        if not resp.ok:
            resp.close()
            raise LogSourceError(f"HTTP {resp.status_code}: {resp.reason or ''}")
        return resp

    def _get_json(self, path: str) -> dict[str, Any]:
        resp = self._get(path)
        try:
            body = resp.json()
        except ValueError as e:
            raise LogSourceError(f"Invalid response from log endpoint: {e!s}", cause=e) from e
        if not isinstance(body, dict):
            raise LogSourceError("Invalid response from log endpoint: expected a JSON object")
        if body.get("success") is False:
            raise LogSourceError(body.get("error") or body.get("message") or "Failed to fetch logs")
        return body

    def get_logs(self, source: LogSource) -> list[LogEntry]:
        body = self._get_json(source.value)
        raw_logs = body.get("logs")
        if raw_logs is None and isinstance(body.get("data"), dict):
            raw_logs = body["data"].get("logs")
        if not isinstance(raw_logs, list):
            raise LogSourceError(f"Invalid {source.value} log response: missing 'logs' list", source=source.value)
        try:
            records = [RawLogRecord.model_validate(r) for r in raw_logs]
        except ValidationError as e:
            raise LogSourceError(f"Invalid {source.value} log record: {e}", source=source.value, cause=e) from e
        return [normalize_record(r, source) for r in records]

    def get_stats(self) -> LogStats:
        body = self._get_json("stats")
        payload = body.get("data") if isinstance(body.get("data"), dict) else body
        try:
            return LogStats.model_validate(payload)
        except ValidationError as e:
            raise LogSourceError(f"Invalid log stats response: {e}", cause=e) from e

    def iter_log_file(self, source: LogSource) -> Iterator[bytes]:
        """Stream the raw file. The request is made before the first chunk is yielded."""
        resp = self._get(f"download/{source.value}", stream=True)

        def _chunks() -> Iterator[bytes]:
            try:
                for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        yield chunk
            except requests.RequestException as e:
                raise LogSourceError(f"Download interrupted: {e!s}", source=source.value, cause=e) from e
            finally:
                resp.close()

        return _chunks()

    def save_log_file(self, source: LogSource, destination: Path) -> Path:
        """Download into `destination` (a directory or a file path). Returns the written path."""
        target = destination / f"{source.value}.log" if destination.is_dir() else destination
        partial = target.with_name(target.name + ".part")
        try:
            with partial.open("wb") as fh:
                for chunk in self.iter_log_file(source):
                    fh.write(chunk)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        partial.replace(target)
        logger.info("Saved %s log to %s", source.value, target)
        return target

    # Async entry points for the API / event loop

    async def fetch_logs(self, source: LogSource) -> list[LogEntry]:
        return await asyncio.to_thread(self.get_logs, source)

    async def stats(self) -> LogStats:
        return await asyncio.to_thread(self.get_stats)

    async def download_log_file(self, source: LogSource, destination: Path) -> Path:
        return await asyncio.to_thread(self.save_log_file, source, destination)
