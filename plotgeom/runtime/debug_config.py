"""Debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _text(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value if value else default


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    log_level: str
    log_format: str
    log_file: str | None
    geometry_trace_enabled: bool


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("PLOTGEOM_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    log_format = _text("PLOTGEOM_LOG_FORMAT", "text").lower()
    return DebugConfig(
        log_level=resolve_log_level_name(),
        log_format=log_format if log_format in {"text", "json"} else "text",
        log_file=_text("PLOTGEOM_LOG_FILE", "") or None,
        geometry_trace_enabled=_flag("PLOTGEOM_DEBUG_GEOMETRY_TRACE", False),
    )
