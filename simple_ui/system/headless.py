import asyncio
from dataclasses import dataclass, field
from typing import Any, Sequence

from simple_ui.system.models import ActionFormResponse, MessageFormResponse, ModalFormResponse
from simple_ui.system.protocols import ActionForm, FormBackend, MessageForm, ModalForm


@dataclass(frozen=True)
class RecordedCall:
    form: str  # "action", "message" or "modal"
    method: str
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class RecordedShow:
    form: str
    identity: Any


@dataclass
class HeadlessBackend(FormBackend):
    """Backend that records construction calls and answers from a script.

    Scripted responses are consumed first-in first-out per form shape. Once a
    queue is empty the matching ``next_*`` default answers. Modal forms without
    a scripted answer echo the defaults of the registered fields.
    """

    recorded_calls: list[RecordedCall] = field(default_factory=list)
    recorded_shows: list[RecordedShow] = field(default_factory=list)

    action_responses: list[ActionFormResponse] = field(default_factory=list)
    message_responses: list[MessageFormResponse] = field(default_factory=list)
    modal_responses: list[ModalFormResponse] = field(default_factory=list)

    next_action_response: ActionFormResponse = field(
        default_factory=lambda: ActionFormResponse(canceled=True)
    )
    next_message_response: MessageFormResponse = field(
        default_factory=lambda: MessageFormResponse(canceled=True)
    )
    next_modal_response: ModalFormResponse | None = None

    def action_form(self) -> ActionForm:
        return _HeadlessActionForm(self)

    def message_form(self) -> MessageForm:
        return _HeadlessMessageForm(self)

    def modal_form(self) -> ModalForm:
        return _HeadlessModalForm(self)

    def calls_for(self, form: str) -> list[RecordedCall]:
        return [call for call in self.recorded_calls if call.form == form]

    def _record(self, form: str, method: str, *args: Any) -> None:
        self.recorded_calls.append(RecordedCall(form, method, args))

    def _next(self, form: str, fallback: Any) -> Any:
        queue = {
            "action": self.action_responses,
            "message": self.message_responses,
            "modal": self.modal_responses,
        }[form]
        if queue:
            return queue.pop(0)
        return fallback

    async def _show(self, form: str, identity: Any) -> None:
        self.recorded_shows.append(RecordedShow(form, identity))
        # Yield once so callers observe a real suspension point.
        await asyncio.sleep(0)


class _HeadlessFormBase:
    form = ""

    def __init__(self, backend: HeadlessBackend):
        self._backend = backend

    def set_title(self, text: str) -> None:
        self._backend._record(self.form, "set_title", text)

    def set_body(self, text: str) -> None:
        self._backend._record(self.form, "set_body", text)


class _HeadlessActionForm(_HeadlessFormBase, ActionForm):
    form = "action"

    def add_button(self, text: str, icon: str | None = None) -> None:
        self._backend._record(self.form, "add_button", text, icon)

    async def show(self, identity: Any) -> ActionFormResponse:
        await self._backend._show(self.form, identity)
        return self._backend._next(self.form, self._backend.next_action_response)


class _HeadlessMessageForm(_HeadlessFormBase, MessageForm):
    form = "message"

    def set_primary_button(self, text: str) -> None:
        self._backend._record(self.form, "set_primary_button", text)

    def set_secondary_button(self, text: str) -> None:
        self._backend._record(self.form, "set_secondary_button", text)

    async def show(self, identity: Any) -> MessageFormResponse:
        await self._backend._show(self.form, identity)
        return self._backend._next(self.form, self._backend.next_message_response)


class _HeadlessModalForm(_HeadlessFormBase, ModalForm):
    form = "modal"

    def __init__(self, backend: HeadlessBackend):
        super().__init__(backend)
        self._defaults: list[Any] = []

    def add_toggle(self, label: str, default_value: bool | None = None) -> None:
        self._backend._record(self.form, "add_toggle", label, default_value)
        self._defaults.append(bool(default_value))

    def add_slider(
        self,
        label: str,
        minimum: float,
        maximum: float,
        step: float,
        default_value: float | None = None,
    ) -> None:
        self._backend._record(self.form, "add_slider", label, minimum, maximum, step, default_value)
        self._defaults.append(minimum if default_value is None else default_value)

    def add_dropdown(
        self,
        label: str,
        options: Sequence[str],
        default_index: int | None = None,
    ) -> None:
        self._backend._record(self.form, "add_dropdown", label, tuple(options), default_index)
        self._defaults.append(0 if default_index is None else default_index)

    def add_text_field(
        self,
        label: str,
        placeholder: str = "",
        default_value: str | None = None,
    ) -> None:
        self._backend._record(self.form, "add_text_field", label, placeholder, default_value)
        self._defaults.append(default_value or "")

    def add_icon(self, path: str) -> None:
        self._backend._record(self.form, "add_icon", path)

    async def show(self, identity: Any) -> ModalFormResponse:
        await self._backend._show(self.form, identity)
        fallback = self._backend.next_modal_response
        if fallback is None:
            fallback = ModalFormResponse(values=tuple(self._defaults))
        return self._backend._next(self.form, fallback)
