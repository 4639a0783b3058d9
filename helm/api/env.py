"""Typed environment variable readers shared by helm hosts."""

from __future__ import annotations

import os


def env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def resolve_log_level_name(prefix: str = "HELM", default: str = "INFO") -> str:
    """Resolve log level with a prefixed override, e.g. ``HELM_LOG_LEVEL``."""
    value = os.getenv(f"{prefix}_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()
