from typing import Any, Protocol, Sequence

from simple_ui.system.models import ActionFormResponse, MessageFormResponse, ModalFormResponse


class ActionForm(Protocol):
    def set_title(self, text: str) -> None: ...
    def set_body(self, text: str) -> None: ...
    def add_button(self, text: str, icon: str | None = None) -> None: ...
    async def show(self, identity: Any) -> ActionFormResponse: ...


class MessageForm(Protocol):
    def set_title(self, text: str) -> None: ...
    def set_body(self, text: str) -> None: ...
    def set_primary_button(self, text: str) -> None: ...
    def set_secondary_button(self, text: str) -> None: ...
    async def show(self, identity: Any) -> MessageFormResponse: ...


class ModalForm(Protocol):
    def set_title(self, text: str) -> None: ...
    def set_body(self, text: str) -> None: ...
    def add_toggle(self, label: str, default_value: bool | None = None) -> None: ...

    def add_slider(
        self,
        label: str,
        minimum: float,
        maximum: float,
        step: float,
        default_value: float | None = None,
    ) -> None: ...

    def add_dropdown(
        self,
        label: str,
        options: Sequence[str],
        default_index: int | None = None,
    ) -> None: ...

    def add_text_field(
        self,
        label: str,
        placeholder: str = "",
        default_value: str | None = None,
    ) -> None: ...

    def add_icon(self, path: str) -> None: ...
    async def show(self, identity: Any) -> ModalFormResponse: ...


class FormBackend(Protocol):
    """Creates a fresh presentation object for every form request."""

    def action_form(self) -> ActionForm: ...
    def message_form(self) -> MessageForm: ...
    def modal_form(self) -> ModalForm: ...
