"""Structured logging: console plus a JSON-lines event log of search requests."""

import contextvars
import json
import logging
import os
import sys
import threading
import time
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from search_nico.core.config import config


def _format_duration(seconds: float) -> str:
    if seconds < 0:
        return "0s"
    if seconds >= 60:
        m = int(seconds // 60)
        s = seconds % 60
        return f"{m}m {s:.0f}s" if s >= 1 else f"{m}m"
    if seconds >= 1:
        return f"{seconds:.1f}s"
    if seconds >= 0.001:
        return f"{seconds * 1000:.0f}ms"
    return "0s"


# (start, path) of the in-flight request in this task
_request_ctx: contextvars.ContextVar[tuple[float, str] | None] = contextvars.ContextVar(
    "search_request", default=None
)


def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def _c(role: str) -> str:
    if not _use_color():
        return ""
    codes = {
        "path": "\033[38;5;81m",
        "ok": "\033[38;5;78m",
        "fail": "\033[38;5;203m",
        "duration": "\033[38;5;221m",
    }
    return codes.get(role, "")


def _reset() -> str:
    if not _use_color():
        return ""
    return "\033[0m"


@dataclass
class LogEvent:
    event_type: str
    timestamp: str
    data: dict[str, Any]

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)


class SearchNicoLogger:
    def __init__(self):
        self.log_file = config.logs_dir / "search.log"
        self._file_lock = threading.Lock()
        self._log_file_handle = None
        self._file_disabled = False
        self._setup_console_logger()

    def _setup_console_logger(self):
        self.console = logging.getLogger("search_nico")
        self.console.setLevel(logging.DEBUG)
        if not self.console.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.INFO)
            handler.setFormatter(
                logging.Formatter("%(asctime)s │ %(message)s", datefmt="%H:%M:%S")
            )
            self.console.addHandler(handler)

    def log_event(self, event: LogEvent) -> None:
        """Append event to the log file. Once the file fails, events go to the console only."""
        with self._file_lock:
            if self._file_disabled:
                return
            try:
                if self._log_file_handle is None:
                    self.log_file.parent.mkdir(parents=True, exist_ok=True)
                    self._log_file_handle = open(self.log_file, "a", encoding="utf-8")
                self._log_file_handle.write(event.to_json() + "\n")
                self._log_file_handle.flush()
            except OSError as e:
                self._file_disabled = True
                self.console.warning(f"⚠️ Event log disabled, cannot write {self.log_file}: {e}")

    def _timestamp(self) -> str:
        return datetime.now().isoformat()

    def request(self, path: str, query: dict[str, Any]):
        _request_ctx.set((time.monotonic(), path))
        event = LogEvent(
            event_type="REQUEST",
            timestamp=self._timestamp(),
            data={"path": path, "query": query},
        )
        self.log_event(event)
        self.console.info(
            f"▶ POST {_c('path')}{path}{_reset()}  query={query.get('query')!r}"
        )

    def response(self, status: int, value_count: int, hits: int | None = None):
        pair = _request_ctx.get()
        if pair is not None:
            _request_ctx.set(None)
            start, path = pair
            elapsed = time.monotonic() - start
        else:
            elapsed = 0.0
            path = "?"
        data: dict[str, Any] = {
            "path": path,
            "status": status,
            "values": value_count,
            "duration_seconds": round(elapsed, 3),
        }
        if hits is not None:
            data["hits"] = hits
        event = LogEvent(event_type="RESPONSE", timestamp=self._timestamp(), data=data)
        self.log_event(event)
        dur = f"{_c('duration')}{_format_duration(elapsed)}{_reset()}"
        status_str = (
            f"{_c('ok')}[{status}]{_reset()}"
            if status == 200
            else f"{_c('fail')}[{status}]{_reset()}"
        )
        hits_str = f"  {hits} hits" if hits is not None else ""
        self.console.info(
            f"✓ Done {_c('path')}{path}{_reset()}  {dur}  {value_count} values{hits_str}  {status_str}"
        )

    def decoded(self, chunk_counts: dict[str, int]):
        event = LogEvent(
            event_type="DECODE",
            timestamp=self._timestamp(),
            data={"chunks": chunk_counts},
        )
        self.log_event(event)
        self.console.debug(f"Decoded chunks: {chunk_counts}")

    def error(self, message: str, exception: Exception | None = None):
        _request_ctx.set(None)
        event = LogEvent(
            event_type="ERROR",
            timestamp=self._timestamp(),
            data={
                "message": message,
                "exception": str(exception) if exception else None,
            },
        )
        self.log_event(event)
        self.console.error(f"❌ Error: {message}")


logger = SearchNicoLogger()
