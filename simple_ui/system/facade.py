"""Process-wide presentation backend selection."""

from __future__ import annotations

import logging

from simple_ui.system.protocols import FormBackend

logger = logging.getLogger(__name__)

_default_backend: FormBackend | None = None


def set_default_backend(backend: FormBackend | None) -> None:
    """Install the backend used by forms built without an explicit one.

    Passing None restores the lazily created Rich console backend.
    """
    global _default_backend
    _default_backend = backend


def get_default_backend() -> FormBackend:
    global _default_backend
    if _default_backend is None:
        from simple_ui.system.components.console import ConsoleBackend

        logger.debug("No default form backend installed; using the console backend")
        _default_backend = ConsoleBackend()
    return _default_backend


def resolve_backend(backend: FormBackend | None) -> FormBackend:
    return backend if backend is not None else get_default_backend()
