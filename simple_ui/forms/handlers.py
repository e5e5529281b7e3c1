"""Response and feedback handlers attached to a form."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence, Union, runtime_checkable

from simple_ui.common.errors import HandlerExecutionError, wrap_error
from simple_ui.system.models import ModalFormResponse, SelectionResponse

logger = logging.getLogger(__name__)

CANCELED = -1
"""Trigger index matching a dismissed form."""


@runtime_checkable
class Executable(Protocol):
    """Anything that can be shown to an identity, typically a ``FormBuilder``."""

    def execute(self, identity: Any) -> Any: ...


@dataclass(frozen=True)
class CallbackAction:
    callback: Callable[[Any], Any]

    def run(self, identity: Any) -> None:
        self.callback(identity)


@dataclass(frozen=True)
class NestedFormAction:
    form: Executable

    def run(self, identity: Any) -> None:
        # Scheduling only; the nested form completes on its own.
        self.form.execute(identity)


HandlerAction = Union[CallbackAction, NestedFormAction]
ActionLike = Union[HandlerAction, Executable, Callable[[Any], Any], Sequence[Any]]


def normalize_action(action: ActionLike) -> tuple[HandlerAction, ...]:
    """Flatten an action, or a list of actions, into runnable steps in order."""
    if isinstance(action, (CallbackAction, NestedFormAction)):
        return (action,)
    if isinstance(action, (list, tuple)):
        return tuple(step for item in action for step in normalize_action(item))
    if isinstance(action, Executable):
        return (NestedFormAction(action),)
    if callable(action):
        return (CallbackAction(action),)
    raise TypeError(
        f"Unsupported response action {action!r}: expected a callable, "
        "a form with execute(), or a list of those"
    )


class ResponseHandler:
    """Runs its actions when a choice or message form resolves to ``trigger_index``.

    ``trigger_index`` is a button position counted over the buttons actually
    registered, or :data:`CANCELED` to react to a dismissed form.
    """

    def __init__(self, trigger_index: int, action: ActionLike) -> None:
        self.trigger_index = trigger_index
        self.actions = normalize_action(action)

    def __repr__(self) -> str:
        return f"ResponseHandler(trigger_index={self.trigger_index}, actions={len(self.actions)})"

    def with_index(self, trigger_index: int) -> ResponseHandler:
        return ResponseHandler(trigger_index, self.actions)

    def with_action(self, action: ActionLike) -> ResponseHandler:
        return ResponseHandler(self.trigger_index, action)

    def matches(self, response: SelectionResponse) -> bool:
        if response.canceled:
            return self.trigger_index == CANCELED
        return response.selection == self.trigger_index

    def run(self, identity: Any) -> None:
        """Run every action in order, stopping at the first failure."""
        for position, action in enumerate(self.actions):
            try:
                action.run(identity)
            except Exception as exc:
                logger.error(
                    "Response handler for index %s failed at action %s: %s",
                    self.trigger_index,
                    position,
                    exc,
                )
                raise wrap_error(
                    HandlerExecutionError,
                    f"Response action {position} for index {self.trigger_index} failed: {exc}",
                    context={
                        "trigger_index": self.trigger_index,
                        "position": position,
                        "action": action,
                    },
                    cause=exc,
                ) from exc


class FeedbackHandler:
    """Receives ``(identity, response)`` once per completed structured-field form."""

    def __init__(self, callback: Callable[[Any, ModalFormResponse], Any]) -> None:
        self.callback = callback

    def __repr__(self) -> str:
        return f"FeedbackHandler({self.callback!r})"

    def with_callback(self, callback: Callable[[Any, ModalFormResponse], Any]) -> FeedbackHandler:
        return FeedbackHandler(callback)

    def run(self, identity: Any, response: ModalFormResponse) -> None:
        try:
            self.callback(identity, response)
        except Exception as exc:
            logger.error("Feedback handler failed: %s", exc)
            raise wrap_error(
                HandlerExecutionError,
                f"Feedback handler failed: {exc}",
                context={"callback": self.callback},
                cause=exc,
            ) from exc
