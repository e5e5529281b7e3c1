"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from simple_ui.common.errors import (
    ConfigurationError,
    HandlerExecutionError,
    SimpleUIError,
    error_to_payload,
    wrap_error,
)


pytestmark = pytest.mark.unit_common


def test_error_to_payload_normalizes_context() -> None:
    err = ConfigurationError(
        "bad form",
        context={
            "icon": Path("/textures/logo"),
            "buttons": 3,
            "nested": {"value": Path("nested")},
            "items": (Path("a"), "b"),
        },
    )
    payload = error_to_payload(err)
    assert payload["error_type"] == "ConfigurationError"
    assert payload["error"] == "bad form"
    assert payload["error_context"]["icon"].endswith("logo")
    assert payload["error_context"]["buttons"] == 3
    assert payload["error_context"]["nested"]["value"] == "nested"
    assert payload["error_context"]["items"] == ["a", "b"]


def test_wrap_error_chains_cause() -> None:
    cause = RuntimeError("boom")
    err = wrap_error(HandlerExecutionError, "handler failed", context={"position": 1}, cause=cause)
    assert isinstance(err, SimpleUIError)
    assert err.__cause__ is cause
    assert err.to_dict() == {
        "type": "HandlerExecutionError",
        "message": "handler failed",
        "context": {"position": 1},
    }


def test_context_defaults_to_empty() -> None:
    assert ConfigurationError("x").context == {}
