"""Presentation boundary: result models, collaborator protocols and backends."""

from simple_ui.system.facade import get_default_backend, set_default_backend
from simple_ui.system.headless import HeadlessBackend
from simple_ui.system.models import (
    ActionFormResponse,
    Button,
    Dropdown,
    FieldDescriptor,
    FormVariant,
    Icon,
    MessageFormResponse,
    ModalFormResponse,
    Slider,
    TextField,
    Toggle,
)
from simple_ui.system.protocols import ActionForm, FormBackend, MessageForm, ModalForm

__all__ = [
    "ActionForm",
    "ActionFormResponse",
    "Button",
    "Dropdown",
    "FieldDescriptor",
    "FormBackend",
    "FormVariant",
    "HeadlessBackend",
    "Icon",
    "MessageForm",
    "MessageFormResponse",
    "ModalForm",
    "ModalFormResponse",
    "Slider",
    "TextField",
    "Toggle",
    "get_default_backend",
    "set_default_backend",
]
