"""Helpers for building button and field descriptors."""

from __future__ import annotations

from typing import Iterable

from simple_ui.system.models import Button, Dropdown, Icon, Slider, TextField, Toggle


def button(text: str, icon: str | None = None) -> Button:
    """Button for choice lists and two-button messages (messages ignore ``icon``)."""
    return Button(text=text, icon=icon)


def toggle(label: str, default_value: bool | None = None) -> Toggle:
    return Toggle(label=label, default_value=default_value)


def slider(
    label: str,
    minimum: float,
    maximum: float,
    step: float,
    default_value: float | None = None,
) -> Slider:
    """Numeric slider; bounds and step are checked by the presentation backend."""
    return Slider(
        label=label,
        minimum=minimum,
        maximum=maximum,
        step=step,
        default_value=default_value,
    )


def dropdown(label: str, options: Iterable[str], default_index: int | None = None) -> Dropdown:
    return Dropdown(label=label, options=tuple(options), default_index=default_index)


def text_field(label: str, placeholder: str = "", default_value: str | None = None) -> TextField:
    return TextField(label=label, placeholder=placeholder, default_value=default_value)


def icon(path: str) -> Icon:
    """Decorative image; produces no value in the modal response."""
    return Icon(path=path)
