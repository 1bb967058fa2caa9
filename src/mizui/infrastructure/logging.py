"""Logging, error-log & crash-log helpers.

Features:
    * RichHandler based console logging (color, tracebacks) for the operator stream
    * Optional JSON logging mode (machine ingest)
    * `ErrorSink`: append-only `error.log` lines plus JSON crash records, so the
        render pipeline never touches log files directly.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from mizui.domain.models import CrashRecord
from mizui.infrastructure.fs import append_jsonl_line, append_line

_INITIALIZED = False
_JSON_MODE = False
_CONSOLE: Console | None = None

logger = logging.getLogger("mizui")


class _JsonHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - simple
        try:
            data = {
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
            }
            if record.exc_info:
                data["exc_info"] = logging.Formatter().formatException(record.exc_info)
            print(json.dumps(data, ensure_ascii=False))
        except Exception as exc:  # pragma: no cover
            logging.getLogger(__name__).debug("json logging emit failed: %s", exc)


def setup_logging(level: str | None = None, json_mode: bool | None = None) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    global _JSON_MODE
    if json_mode is not None:
        _JSON_MODE = json_mode
    lvl_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    lvl = getattr(logging, lvl_name, logging.INFO)
    handlers: list[logging.Handler] = []
    if _JSON_MODE:
        handlers.append(_JsonHandler())
    else:
        handlers.append(RichHandler(rich_tracebacks=True, show_path=False))
    logging.basicConfig(level=lvl, handlers=handlers, force=True, format="%(message)s",
                        datefmt="%H:%M:%S")
    _INITIALIZED = True


def get_console() -> Console:
    """Return a shared rich Console."""
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console()
    return _CONSOLE


def render_panel(title: str, body: str, *, style: str = "cyan") -> None:
    get_console().print(Panel.fit(body, title=title, border_style=style))


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ErrorSink:
    """Append-only error & crash persistence (best-effort, synchronous).

    `log_error` writes `[<timestamp>] ERROR: <message>` to the error log and
    surfaces the message on the `mizui` logger. `log_crash` appends one JSON line
    per crash. A failing disk write is reported at debug level and dropped.
    """

    def __init__(self, error_log: str | Path, crash_log: str | Path):
        self.error_log = Path(error_log)
        self.crash_log = Path(crash_log)

    def log_error(self, message: str) -> None:
        logger.error(message)
        try:
            append_line(self.error_log, f"[{_now_iso()}] ERROR: {message}")
        except OSError as exc:  # pragma: no cover - disk failure
            logger.debug("error log write failed: %s", exc)

    def log_crash(self, identifier: str, data: Any, error: BaseException) -> CrashRecord:
        record = CrashRecord(template_path=identifier, data=data, error=str(error))
        try:
            append_jsonl_line(self.crash_log, {**record.model_dump(exclude={"data"}), "data": data})
        except (OSError, TypeError) as exc:  # pragma: no cover - disk / encode failure
            logger.debug("crash log write failed: %s", exc)
        return record


__all__ = [
    "ErrorSink",
    "get_console",
    "render_panel",
    "setup_logging",
]
