"""Tests for configure_logging."""

import json
import logging

import pytest

from simple_ui.common.logging import configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_force_installs_stream_and_file_handlers(root_logger, tmp_path) -> None:
    log_file = tmp_path / "forms.log"
    configure_logging(level="warning", log_file=str(log_file), json=True, force=True)

    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 2

    logging.getLogger("simple_ui.test").warning("form %s failed", "menu")
    for handler in root_logger.handlers:
        handler.flush()
    record = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert record["event"] == "form menu failed"
    assert record["level"] == "warning"


def test_environment_level_and_debug_flag(root_logger, monkeypatch) -> None:
    monkeypatch.setenv("SIMPLE_UI_LOG_LEVEL", "error")
    configure_logging(force=True)
    assert root_logger.level == logging.ERROR

    configure_logging(debug=True, force=True)
    assert root_logger.level == logging.DEBUG


def test_existing_handlers_are_kept_without_force(root_logger) -> None:
    marker = logging.NullHandler()
    root_logger.addHandler(marker)
    configure_logging(level="debug")
    assert marker in root_logger.handlers
