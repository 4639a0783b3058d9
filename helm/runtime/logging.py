"""Root logger wiring: console always, per-run file through a queue."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from helm.api.logging import JsonFormatter, LoggingConfig

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_listener: QueueListener | None = None


def configure_runtime_logging(config: LoggingConfig) -> None:
    """Replace root handlers according to ``config``.

    With a file configured, records are handed to a ``QueueListener`` thread so
    file writes stay off the caller's path. Call ``shutdown_runtime_logging``
    before exit to flush it.
    """
    global _listener

    shutdown_runtime_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.strip().upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, *handlers, respect_handler_level=True)
    _listener.start()


def shutdown_runtime_logging() -> None:
    global _listener

    if _listener is not None:
        _listener.stop()
        _listener = None


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter_for(config.file_format))
        handlers.append(file_handler)
    return handlers


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
