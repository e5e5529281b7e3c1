"""Routing of completed form responses to registered handlers."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from simple_ui.forms.handlers import FeedbackHandler, ResponseHandler
from simple_ui.system.models import ModalFormResponse, SelectionResponse

logger = logging.getLogger(__name__)


def dispatch_response(
    handlers: Sequence[ResponseHandler],
    response: SelectionResponse,
    identity: Any,
) -> int:
    """Run every handler matching ``response`` in registration order.

    Duplicate trigger indices all fire. A failing handler stops the pass and
    its HandlerExecutionError propagates. Returns the number of handlers run.
    """
    fired = 0
    for handler in handlers:
        if not handler.matches(response):
            continue
        logger.debug(
            "Firing response handler for index %s (selection=%s, canceled=%s)",
            handler.trigger_index,
            response.selection,
            response.canceled,
        )
        handler.run(identity)
        fired += 1
    if not fired:
        logger.debug(
            "No response handler matched selection=%s canceled=%s",
            response.selection,
            response.canceled,
        )
    return fired


def dispatch_feedback(
    feedback: FeedbackHandler | None,
    response: ModalFormResponse,
    identity: Any,
) -> None:
    """Forward the unmodified modal response to the feedback handler."""
    if feedback is None:
        logger.debug("Structured form completed without a feedback handler")
        return
    feedback.run(identity, response)
