"""Logging for pathgraph.

All modules log through children of the ``pathgraph`` logger, which gets a
single stdout handler on first use. Search progress (settled nodes,
relaxations, the path found) is emitted at DEBUG; ``search_trace()`` turns it
on for a block of code.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

ROOT_LOGGER_NAME = "pathgraph"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``pathgraph`` logger once.

    Args:
        level: Package log level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )
    root_logger.addHandler(handler)
    # Propagate so pytest's caplog sees the records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the package level and handler."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``pathgraph`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Emit search traces from every subsequent query."""
    set_global_log_level(logging.DEBUG)


@contextmanager
def search_trace() -> Iterator[None]:
    """Emit search traces for queries run inside the block.

    The previous package level is restored on exit, including on errors.

    Example:
        >>> with search_trace():
        ...     find_path(graph, "A", "C")
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    previous = root_logger.level
    handler_levels = [(h, h.level) for h in root_logger.handlers]
    set_global_log_level(logging.DEBUG)
    try:
        yield
    finally:
        root_logger.setLevel(previous)
        for handler, level in handler_levels:
            handler.setLevel(level)


def describe_path(nodes: Iterable) -> str:
    """Render nodes (handles or values) as ``A -> B -> C`` for log records."""
    return " -> ".join(repr(getattr(node, "value", node)) for node in nodes)


def reset_logging() -> None:
    """Drop the package handler and level (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
