"""Runtime configuration and logging wiring."""

from plotgeom.runtime.debug_config import DebugConfig, load_debug_config, resolve_log_level_name
from plotgeom.runtime.logging import configure_logging, get_logger, setup_logging, shutdown_logging

__all__ = [
    "DebugConfig",
    "configure_logging",
    "get_logger",
    "load_debug_config",
    "resolve_log_level_name",
    "setup_logging",
    "shutdown_logging",
]
