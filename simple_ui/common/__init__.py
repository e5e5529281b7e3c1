"""Shared helpers for simple-ui."""

from simple_ui.common.errors import ConfigurationError, HandlerExecutionError, SimpleUIError
from simple_ui.common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "HandlerExecutionError",
    "SimpleUIError",
]
