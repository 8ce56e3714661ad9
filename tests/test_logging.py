import json
import logging

import pytest

from core.logging import bootstrap_logging, context, get_context, get_logger, shutdown_logging
from core.logging.formatter import JSONFormatter
from core.logging.levels import LogLevel, to_level


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_to_level_accepts_names_and_numbers():
    assert to_level("trace") == LogLevel.TRACE
    assert to_level("SUCCESS") == 25
    assert to_level("debug") == logging.DEBUG
    assert to_level(40) == 40
    assert to_level("loud") == logging.INFO


def test_context_is_scoped_to_block():
    with context(nickname="s1mple", game=None):
        assert get_context() == {"nickname": "s1mple"}
        with context(player_id="p1"):
            assert get_context() == {"nickname": "s1mple", "player_id": "p1"}
        assert "player_id" not in get_context()
    assert get_context() == {}


def test_json_formatter_includes_context_snapshot():
    record = logging.LogRecord("statclock.test", logging.INFO, __file__, 1, "hello", None, None)
    record.service = "cli"
    record.log_context = {"nickname": "s1mple"}

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "hello"
    assert payload["service"] == "cli"
    assert payload["context"] == {"nickname": "s1mple"}


def test_file_log_is_jsonl_with_context(tmp_path, restore_root, monkeypatch):
    monkeypatch.delenv("LOG_CONSOLE", raising=False)
    bootstrap_logging(service="statclock", level="DEBUG", log_dir=tmp_path, log_file_name="run.jsonl")
    log = get_logger("statclock.test", service="lookup")

    with context(nickname="s1mple"):
        log.success(lambda: "player found")
    shutdown_logging()

    lines = (tmp_path / "run.jsonl").read_text(encoding="utf-8").splitlines()
    entry = json.loads(lines[-1])
    assert entry["level"] == "SUCCESS"
    assert entry["service"] == "lookup"
    assert entry["context"] == {"nickname": "s1mple"}


def test_lazy_message_not_built_when_disabled(restore_root):
    bootstrap_logging(level="WARNING")
    calls = []

    get_logger("statclock.test").debug(lambda: calls.append(1) or "expensive")

    assert calls == []


def test_public_api():
    import core.logging

    assert sorted(core.logging.__all__) == [
        "StructuredLogger",
        "bootstrap_logging",
        "context",
        "get_context",
        "get_logger",
        "shutdown_logging",
        "traceable",
    ]
