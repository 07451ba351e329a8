from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager

import pytest

from plotgeom.geometry.rect import TRACE_LOGGER_NAME
from plotgeom.runtime.logging import shutdown_logging


@contextmanager
def _empty_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    trace = logging.getLogger(TRACE_LOGGER_NAME)
    original_handlers = list(root.handlers)
    original_level = root.level
    original_trace_level = trace.level
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    try:
        yield root
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
        trace.setLevel(original_trace_level)


@pytest.fixture
def isolated_root_logging() -> Callable[[], AbstractContextManager[logging.Logger]]:
    """Context manager giving the test body an empty root logger, restored on exit."""
    return _empty_root_logger
