"""Main CLI entry-point."""
from __future__ import annotations

import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import MetricCommand


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="statclock",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="statclock.jsonl",
    )
    try:
        return MetricCommand().run(argv)
    finally:
        shutdown_logging()


def run() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(run())
