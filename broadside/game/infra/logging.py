"""App-level logging policy over the helm logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from helm.api.logging import JsonFormatter, LoggingConfig, configure_logging
from helm.api.env import resolve_log_level_name
from broadside.game.infra.app_data import resolve_logs_dir

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> LoggingConfig:
    """Build logging config from env: level, console format and per-run file."""
    return LoggingConfig(
        level_name=resolve_log_level_name(prefix="BROADSIDE", default="INFO"),
        console_format=os.getenv("LOG_FORMAT", "text").lower(),
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via helm logging API."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"broadside_run_{stamp}.jsonl")
