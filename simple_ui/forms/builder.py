"""Fluent form builder."""

from __future__ import annotations

import asyncio
import logging
import weakref
from dataclasses import dataclass, field, replace
from typing import Any, Coroutine, Iterable

from simple_ui.forms.handlers import FeedbackHandler, ResponseHandler
from simple_ui.forms.strategies import FormStrategy, strategy_for
from simple_ui.system.facade import resolve_backend
from simple_ui.system.models import Button, FieldDescriptor, FormVariant
from simple_ui.system.protocols import FormBackend

logger = logging.getLogger(__name__)

# Strong references to scheduled completions until they finish, per event loop.
_pending: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, set[asyncio.Task[Any]]] = (
    weakref.WeakKeyDictionary()
)


def _pending_for(loop: asyncio.AbstractEventLoop) -> set[asyncio.Task[Any]]:
    return _pending.setdefault(loop, set())


async def _run_to_completion(interaction: Coroutine[Any, Any, Any]) -> Any:
    result = await interaction
    pending = _pending_for(asyncio.get_running_loop())
    while pending:
        await asyncio.gather(*pending)
    return result


@dataclass
class FormConfig:
    """Attributes accumulated by a FormBuilder; nothing is validated here."""

    variant: FormVariant | str | None = None
    title: str | None = None
    body: str | None = None
    buttons: list[Button | None] = field(default_factory=list)
    fields: list[FieldDescriptor | Any] = field(default_factory=list)
    handlers: list[ResponseHandler] = field(default_factory=list)
    feedback: FeedbackHandler | None = None

    def snapshot(self) -> FormConfig:
        return replace(
            self,
            buttons=list(self.buttons),
            fields=list(self.fields),
            handlers=list(self.handlers),
        )


class FormBuilder:
    """Declarative description of one form and the reactions to its answer.

    Setters return the builder so a form reads as a single chained
    expression. List setters replace the whole list. Configuration problems
    surface as ConfigurationError from ``execute``/``show``, before the form
    is shown.

    Example::

        FormBuilder(backend).variant(FormVariant.CHOICE_LIST).title("Menu").buttons(
            [button("Shop"), button("Quit")]
        ).responses(
            [ResponseHandler(0, open_shop), ResponseHandler(CANCELED, say_goodbye)]
        ).execute(player)
    """

    def __init__(self, backend: FormBackend | None = None) -> None:
        self.config = FormConfig()
        self.completion: asyncio.Task[Any] | None = None
        self._backend = backend

    def variant(self, variant: FormVariant | str) -> FormBuilder:
        self.config.variant = variant
        return self

    def title(self, title: str) -> FormBuilder:
        self.config.title = title
        return self

    def body(self, body: str) -> FormBuilder:
        self.config.body = body
        return self

    def buttons(self, buttons: Iterable[Button | None]) -> FormBuilder:
        """Buttons for choice lists (None entries are skipped) and messages."""
        self.config.buttons = list(buttons)
        return self

    def fields(self, fields: Iterable[FieldDescriptor | Any]) -> FormBuilder:
        """Fields for structured forms, in display and response order."""
        self.config.fields = list(fields)
        return self

    def responses(self, handlers: Iterable[ResponseHandler]) -> FormBuilder:
        self.config.handlers = list(handlers)
        return self

    def feedback(self, feedback: FeedbackHandler) -> FormBuilder:
        self.config.feedback = feedback
        return self

    def execute(self, identity: Any) -> FormBuilder:
        """Show the form to ``identity`` and dispatch the answer when it arrives.

        Inside a running event loop the interaction is scheduled as a task,
        exposed as ``completion``; awaiting it re-raises handler failures.
        Without a running loop the interaction, and any nested forms its
        handlers open, run to completion before this returns.
        """
        strategy, config, form = self._prepare()
        interaction = strategy.run(form, config, identity)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.completion = None
            asyncio.run(_run_to_completion(interaction))
            return self

        task = loop.create_task(interaction)
        pending = _pending_for(loop)
        pending.add(task)
        task.add_done_callback(pending.discard)
        self.completion = task
        return self

    async def show(self, identity: Any) -> Any:
        """Show the form, dispatch the answer and return the backend's response."""
        strategy, config, form = self._prepare()
        return await strategy.run(form, config, identity)

    def _prepare(self) -> tuple[FormStrategy, FormConfig, Any]:
        config = self.config.snapshot()
        strategy = strategy_for(config.variant)
        form = strategy.prepare(config, resolve_backend(self._backend))
        logger.debug("Prepared %s form %r", strategy.variant.value, config.title)
        return strategy, config, form
