from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "statclock",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "statclock.jsonl",
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger once per process.

    Console output goes to stderr so stdout carries nothing but the metric
    line. The JSONL file is written from a background listener thread.
    """
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    service_filter = _ServiceFilter(service)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler(sys.stderr)
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(service_filter)
        root.addHandler(console)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        except OSError as e:
            # Read-only checkouts still get a working CLI, just without a log file.
            print(f"warning: file logging disabled ({e})", file=sys.stderr)
        else:
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            qh = QueueHandler(q)
            qh.addFilter(service_filter)
            root.addHandler(qh)
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self._service
        if getattr(record, "log_context", None) is None:
            record.log_context = get_context()
        return True
