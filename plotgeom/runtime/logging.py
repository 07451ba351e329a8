"""Logging implementation."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from plotgeom.api.logging import GeometryLoggingConfig, JsonFormatter
from plotgeom.geometry.rect import TRACE_LOGGER_NAME
from plotgeom.runtime.debug_config import load_debug_config

_QUEUE_LISTENER: QueueListener | None = None


def configure_logging(config: GeometryLoggingConfig) -> None:
    """Configure root logging with optional async file streaming."""
    global _QUEUE_LISTENER

    shutdown_logging()

    level = getattr(logging, config.level_name.upper(), logging.INFO)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    logging.getLogger(TRACE_LOGGER_NAME).setLevel(
        logging.DEBUG if config.geometry_trace_enabled else logging.WARNING
    )

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_logging() -> None:
    """Configure logging from the environment if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    debug = load_debug_config()
    configure_logging(
        GeometryLoggingConfig(
            level_name=debug.log_level,
            console_format=debug.log_format,
            file_path=debug.log_file,
            file_format="json",
            geometry_trace_enabled=debug.geometry_trace_enabled,
        )
    )


def shutdown_logging() -> None:
    """Stop the file streaming listener, flushing queued records."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    for handler in _QUEUE_LISTENER.handlers:
        handler.close()
    _QUEUE_LISTENER = None


def get_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
