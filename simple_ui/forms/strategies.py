"""Per-variant construction of presentation forms.

Each strategy validates a configuration snapshot, drives the backend's
construction calls and, once the form is shown, hands the response to the
dispatch path for its variant. All validation happens in ``prepare`` so that
a misconfigured form fails before anything is shown.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from simple_ui.common.errors import ConfigurationError
from simple_ui.forms.dispatch import dispatch_feedback, dispatch_response
from simple_ui.system.models import Dropdown, FormVariant, Icon, Slider, TextField, Toggle
from simple_ui.system.protocols import ActionForm, FormBackend, MessageForm, ModalForm

if TYPE_CHECKING:
    from simple_ui.forms.builder import FormConfig

logger = logging.getLogger(__name__)


def resolve_variant(value: Any) -> FormVariant:
    if value is None:
        raise ConfigurationError("Form variant is not set")
    try:
        return FormVariant(value)
    except ValueError as exc:
        raise ConfigurationError(
            f"Unknown form variant {value!r}",
            context={"variant": value, "known": [item.value for item in FormVariant]},
            cause=exc,
        ) from exc


class FormStrategy(ABC):
    """Builds and completes one form shape."""

    variant: ClassVar[FormVariant]

    @abstractmethod
    def prepare(self, config: FormConfig, backend: FormBackend) -> Any:
        """Validate ``config`` and return a fully constructed, unshown form."""

    @abstractmethod
    async def run(self, form: Any, config: FormConfig, identity: Any) -> Any:
        """Show ``form`` to ``identity`` and dispatch its response."""

    def _require_title(self, config: FormConfig) -> str:
        if config.title is None:
            raise ConfigurationError(
                "Form title is required", context={"variant": self.variant.value}
            )
        return config.title

    @staticmethod
    def _apply_header(form: Any, title: str, body: str | None) -> None:
        form.set_title(title)
        if body is not None:
            form.set_body(body)


class ChoiceListStrategy(FormStrategy):
    variant = FormVariant.CHOICE_LIST

    def prepare(self, config: FormConfig, backend: FormBackend) -> ActionForm:
        title = self._require_title(config)
        # Null slots are dropped, so response indices follow registered buttons.
        registered = [item for item in config.buttons if item is not None]
        if not registered:
            raise ConfigurationError(
                "Choice list form needs at least one button",
                context={"buttons": len(config.buttons)},
            )

        form = backend.action_form()
        self._apply_header(form, title, config.body)
        for item in registered:
            if item.icon is None:
                form.add_button(item.text)
            else:
                form.add_button(item.text, item.icon)
        logger.debug("Built choice list form %r with %d buttons", title, len(registered))
        return form

    async def run(self, form: ActionForm, config: FormConfig, identity: Any) -> Any:
        response = await form.show(identity)
        dispatch_response(config.handlers, response, identity)
        return response


class TwoButtonMessageStrategy(FormStrategy):
    variant = FormVariant.TWO_BUTTON_MESSAGE

    def prepare(self, config: FormConfig, backend: FormBackend) -> MessageForm:
        title = self._require_title(config)
        if len(config.buttons) != 2:
            raise ConfigurationError(
                f"Message form needs exactly 2 buttons, got {len(config.buttons)}",
                context={"buttons": len(config.buttons)},
            )
        primary, secondary = config.buttons
        if primary is None or secondary is None:
            raise ConfigurationError(
                "Message form buttons cannot be empty",
                context={"primary": primary is not None, "secondary": secondary is not None},
            )

        form = backend.message_form()
        self._apply_header(form, title, config.body)
        form.set_primary_button(primary.text)
        form.set_secondary_button(secondary.text)
        logger.debug("Built message form %r", title)
        return form

    async def run(self, form: MessageForm, config: FormConfig, identity: Any) -> Any:
        response = await form.show(identity)
        dispatch_response(config.handlers, response, identity)
        return response


_FIELD_REGISTRARS: dict[str, Callable[[ModalForm, Any], None]] = {
    Toggle.kind: lambda form, item: form.add_toggle(item.label, item.default_value),
    Slider.kind: lambda form, item: form.add_slider(
        item.label, item.minimum, item.maximum, item.step, item.default_value
    ),
    Dropdown.kind: lambda form, item: form.add_dropdown(
        item.label, item.options, item.default_index
    ),
    TextField.kind: lambda form, item: form.add_text_field(
        item.label, item.placeholder, item.default_value
    ),
    Icon.kind: lambda form, item: form.add_icon(item.path),
}


class StructuredFieldsStrategy(FormStrategy):
    variant = FormVariant.STRUCTURED_FIELDS

    def prepare(self, config: FormConfig, backend: FormBackend) -> ModalForm:
        title = self._require_title(config)
        form = backend.modal_form()
        self._apply_header(form, title, config.body)
        for position, item in enumerate(config.fields):
            kind = getattr(item, "kind", None)
            register = _FIELD_REGISTRARS.get(kind)
            if register is None:
                logger.debug("Skipping field %d with unknown kind %r", position, kind)
                continue
            register(form, item)
        logger.debug("Built structured form %r with %d fields", title, len(config.fields))
        return form

    async def run(self, form: ModalForm, config: FormConfig, identity: Any) -> Any:
        response = await form.show(identity)
        dispatch_feedback(config.feedback, response, identity)
        return response


STRATEGIES: dict[FormVariant, FormStrategy] = {
    strategy.variant: strategy
    for strategy in (ChoiceListStrategy(), TwoButtonMessageStrategy(), StructuredFieldsStrategy())
}


def strategy_for(value: Any) -> FormStrategy:
    return STRATEGIES[resolve_variant(value)]
