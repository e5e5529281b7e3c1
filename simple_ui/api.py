"""Public API surface for simple_ui."""

from simple_ui.common.errors import ConfigurationError, HandlerExecutionError, SimpleUIError
from simple_ui.common.logging import configure_logging
from simple_ui.forms import (
    CANCELED,
    FeedbackHandler,
    FormBuilder,
    ResponseHandler,
    button,
    dropdown,
    icon,
    slider,
    text_field,
    toggle,
)
from simple_ui.system import (
    ActionFormResponse,
    FormBackend,
    FormVariant,
    HeadlessBackend,
    MessageFormResponse,
    ModalFormResponse,
    set_default_backend,
)
from simple_ui.system.components import ConsoleBackend

__all__ = [
    "ActionFormResponse",
    "CANCELED",
    "ConfigurationError",
    "ConsoleBackend",
    "FeedbackHandler",
    "FormBackend",
    "FormBuilder",
    "FormVariant",
    "HandlerExecutionError",
    "HeadlessBackend",
    "MessageFormResponse",
    "ModalFormResponse",
    "ResponseHandler",
    "SimpleUIError",
    "button",
    "configure_logging",
    "dropdown",
    "icon",
    "set_default_backend",
    "slider",
    "text_field",
    "toggle",
]
