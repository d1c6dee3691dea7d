from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator
import logging

_LOG_DEPTH: ContextVar[int] = ContextVar("log_depth", default=0)
LOG_FORMAT = "%(levelname)s %(indent)s%(message)s"


class IndentFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.indent = "  " * _LOG_DEPTH.get()
        return True


@contextmanager
def log_indent() -> Iterator[None]:
    """Nest log lines emitted inside the block one level deeper."""
    token = _LOG_DEPTH.set(_LOG_DEPTH.get() + 1)
    try:
        yield
    finally:
        _LOG_DEPTH.reset(token)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in root_logger.handlers:
        if not any(isinstance(f, IndentFilter) for f in handler.filters):
            handler.addFilter(IndentFilter())
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
