"""Form builder, per-variant strategies and response dispatch."""

from simple_ui.forms.builder import FormBuilder, FormConfig
from simple_ui.forms.elements import button, dropdown, icon, slider, text_field, toggle
from simple_ui.forms.handlers import CANCELED, FeedbackHandler, ResponseHandler

__all__ = [
    "CANCELED",
    "FeedbackHandler",
    "FormBuilder",
    "FormConfig",
    "ResponseHandler",
    "button",
    "dropdown",
    "icon",
    "slider",
    "text_field",
    "toggle",
]
