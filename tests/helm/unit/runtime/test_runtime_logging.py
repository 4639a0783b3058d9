import json
import logging
from pathlib import Path

import pytest

from helm.api.logging import JsonFormatter, LoggingConfig, configure_logging, shutdown_logging
from helm.api.env import env_float, env_int, resolve_log_level_name


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord("helm.test", logging.INFO, __file__, 1, "shot %s", ("B5",), None)
    record.side = "player"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "helm.test"
    assert payload["msg"] == "shot B5"
    assert payload["fields"] == {"side": "player"}


def test_configure_logging_streams_to_file(tmp_path: Path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"
    configure_logging(LoggingConfig(level_name="debug", file_path=str(log_file)))
    assert restore_root_logger.level == logging.DEBUG
    logging.getLogger("helm.test").info("match_started", extra={"seed": 4})
    shutdown_logging()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["msg"] == "match_started"
    assert payload["fields"]["seed"] == 4


def test_configure_logging_console_only(restore_root_logger) -> None:
    configure_logging(LoggingConfig(level_name="warning"))
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)


def test_env_readers(monkeypatch) -> None:
    monkeypatch.setenv("HELM_TEST_INT", "12")
    monkeypatch.setenv("HELM_TEST_FLOAT", "bad")
    assert env_int("HELM_TEST_INT", None) == 12
    assert env_int("HELM_TEST_MISSING", 3) == 3
    assert env_float("HELM_TEST_FLOAT", 1.5) == 1.5
    monkeypatch.setenv("HELM_LOG_LEVEL", " debug ")
    assert resolve_log_level_name() == "DEBUG"
