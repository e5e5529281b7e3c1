"""Tests for choice list construction and response fan-out."""

import asyncio

import pytest

from simple_ui.common.errors import ConfigurationError
from simple_ui.forms import CANCELED, FeedbackHandler, FormBuilder, ResponseHandler, button
from simple_ui.system import ActionFormResponse, FormVariant
from simple_ui.system.headless import RecordedCall


pytestmark = pytest.mark.unit_forms


def _recorder(log: list[str], name: str):
    return lambda identity: log.append(f"{name}:{identity}")


def _choice_form(backend, buttons, handlers):
    return (
        FormBuilder(backend)
        .variant(FormVariant.CHOICE_LIST)
        .title("Pick")
        .buttons(buttons)
        .responses(handlers)
    )


def test_construction_calls_follow_button_order(backend):
    form = (
        FormBuilder(backend)
        .variant(FormVariant.CHOICE_LIST)
        .title("Warp")
        .body("Where to?")
        .buttons([button("Spawn", "textures/spawn"), button("Arena")])
    )
    form.execute("alice")

    assert backend.calls_for("action") == [
        RecordedCall("action", "set_title", ("Warp",)),
        RecordedCall("action", "set_body", ("Where to?",)),
        RecordedCall("action", "add_button", ("Spawn", "textures/spawn")),
        RecordedCall("action", "add_button", ("Arena", None)),
    ]


def test_body_is_not_set_when_absent(backend):
    _choice_form(backend, [button("A")], []).execute("alice")
    assert "set_body" not in [call.method for call in backend.recorded_calls]


def test_null_buttons_are_skipped_and_do_not_consume_an_index(backend):
    backend.action_responses.append(ActionFormResponse(selection=1))
    log: list[str] = []
    form = _choice_form(
        backend,
        [button("A"), None, button("B"), None],
        [ResponseHandler(1, _recorder(log, "B")), ResponseHandler(2, _recorder(log, "none"))],
    )
    form.execute("alice")

    buttons = [call.args[0] for call in backend.calls_for("action") if call.method == "add_button"]
    assert buttons == ["A", "B"]
    assert log == ["B:alice"]


def test_selection_fans_out_to_every_matching_handler_in_order(backend):
    backend.action_responses.append(ActionFormResponse(selection=1))
    log: list[str] = []
    form = _choice_form(
        backend,
        [button("A"), button("B"), button("C")],
        [
            ResponseHandler(1, _recorder(log, "f")),
            ResponseHandler(1, _recorder(log, "g")),
            ResponseHandler(CANCELED, _recorder(log, "h")),
        ],
    )
    form.execute("alice")
    assert log == ["f:alice", "g:alice"]


def test_cancel_fires_only_cancel_handlers(backend):
    # A stale selection must not leak into a canceled response.
    backend.action_responses.append(ActionFormResponse(selection=1, canceled=True))
    log: list[str] = []
    form = _choice_form(
        backend,
        [button("A"), button("B"), button("C")],
        [
            ResponseHandler(1, _recorder(log, "f")),
            ResponseHandler(1, _recorder(log, "g")),
            ResponseHandler(CANCELED, _recorder(log, "h")),
        ],
    )
    form.execute("alice")
    assert log == ["h:alice"]


def test_unmatched_selection_runs_nothing(backend):
    backend.action_responses.append(ActionFormResponse(selection=2))
    log: list[str] = []
    form = _choice_form(
        backend,
        [button("A"), button("B"), button("C")],
        [ResponseHandler(0, _recorder(log, "a")), ResponseHandler(CANCELED, _recorder(log, "x"))],
    )
    response = asyncio.run(form.show("alice"))
    assert response.selection == 2
    assert log == []


@pytest.mark.parametrize("buttons", [[], [None], [None, None]])
def test_choice_list_without_buttons_fails_before_show(backend, buttons):
    with pytest.raises(ConfigurationError):
        _choice_form(backend, buttons, []).execute("alice")
    assert backend.recorded_shows == []


def test_feedback_is_ignored_by_choice_lists(backend):
    backend.action_responses.append(ActionFormResponse(selection=0))
    log: list[str] = []

    form = _choice_form(backend, [button("A")], [ResponseHandler(0, _recorder(log, "a"))])
    form.feedback(FeedbackHandler(lambda who, response: log.append("feedback")))
    form.execute("alice")
    assert log == ["a:alice"]
