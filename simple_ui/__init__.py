"""Declarative dialog forms with automatic response routing."""

from importlib import metadata

from simple_ui.api import (
    CANCELED,
    ConfigurationError,
    FeedbackHandler,
    FormBuilder,
    FormVariant,
    HandlerExecutionError,
    ResponseHandler,
    button,
    configure_logging,
    dropdown,
    icon,
    set_default_backend,
    slider,
    text_field,
    toggle,
)

try:
    __version__ = metadata.version("simple-ui-forms")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "CANCELED",
    "ConfigurationError",
    "FeedbackHandler",
    "FormBuilder",
    "FormVariant",
    "HandlerExecutionError",
    "ResponseHandler",
    "__version__",
    "button",
    "configure_logging",
    "dropdown",
    "icon",
    "set_default_backend",
    "slider",
    "text_field",
    "toggle",
]
