"""Rich terminal rendering of the three form shapes."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, Prompt
from rich.table import Table

from simple_ui.common.config.settings import UISettings, load_settings
from simple_ui.system.models import ActionFormResponse, MessageFormResponse, ModalFormResponse
from simple_ui.system.protocols import ActionForm, FormBackend, MessageForm, ModalForm


class ConsoleBackend(FormBackend):
    def __init__(self, console: Console | None = None, settings: UISettings | None = None):
        self._console = console or Console()
        self._settings = settings or load_settings()

    def action_form(self) -> ActionForm:
        return ConsoleActionForm(self._console, self._settings)

    def message_form(self) -> MessageForm:
        return ConsoleMessageForm(self._console, self._settings)

    def modal_form(self) -> ModalForm:
        return ConsoleModalForm(self._console, self._settings)


class _ConsoleFormBase:
    def __init__(self, console: Console, settings: UISettings):
        self._console = console
        self._settings = settings
        self._title = ""
        self._body: str | None = None

    def set_title(self, text: str) -> None:
        self._title = text

    def set_body(self, text: str) -> None:
        self._body = text

    def _render_header(self, identity: Any) -> None:
        subtitle = str(identity) if self._settings.show_identity and identity is not None else None
        self._console.print(
            Panel(
                self._body or "",
                title=f"[bold]{self._title}[/bold]",
                subtitle=subtitle,
                border_style="blue",
            )
        )

    def _choose(self, labels: Sequence[str]) -> int | None:
        """Ask for a 1-based choice; the cancel keyword returns None."""
        self._print_options(labels)

        cancel = self._settings.cancel_keyword
        choices = [str(position) for position in range(1, len(labels) + 1)] + [cancel]
        answer = Prompt.ask(
            f"Choose ([dim]{cancel} to cancel[/dim])",
            console=self._console,
            choices=choices,
            show_choices=False,
        )
        if answer == cancel:
            return None
        return int(answer) - 1

    def _print_options(self, labels: Sequence[str]) -> None:
        table = Table(show_header=False, box=None)
        table.add_column(justify="right", style="cyan")
        table.add_column()
        for position, label in enumerate(labels, start=1):
            table.add_row(str(position), label)
        self._console.print(table)

    async def _interact(self, prompt: Callable[[], Any]) -> Any:
        return await asyncio.to_thread(prompt)


class ConsoleActionForm(_ConsoleFormBase, ActionForm):
    def __init__(self, console: Console, settings: UISettings):
        super().__init__(console, settings)
        self._buttons: list[str] = []

    def add_button(self, text: str, icon: str | None = None) -> None:
        self._buttons.append(f"{text} [dim]({icon})[/dim]" if icon else text)

    async def show(self, identity: Any) -> ActionFormResponse:
        return await self._interact(lambda: self._prompt(identity))

    def _prompt(self, identity: Any) -> ActionFormResponse:
        self._render_header(identity)
        try:
            selection = self._choose(self._buttons)
        except (EOFError, KeyboardInterrupt):
            return ActionFormResponse(canceled=True)
        if selection is None:
            return ActionFormResponse(canceled=True)
        return ActionFormResponse(selection=selection)


class ConsoleMessageForm(_ConsoleFormBase, MessageForm):
    def __init__(self, console: Console, settings: UISettings):
        super().__init__(console, settings)
        self._primary = ""
        self._secondary = ""

    def set_primary_button(self, text: str) -> None:
        self._primary = text

    def set_secondary_button(self, text: str) -> None:
        self._secondary = text

    async def show(self, identity: Any) -> MessageFormResponse:
        return await self._interact(lambda: self._prompt(identity))

    def _prompt(self, identity: Any) -> MessageFormResponse:
        self._render_header(identity)
        try:
            selection = self._choose([self._primary, self._secondary])
        except (EOFError, KeyboardInterrupt):
            return MessageFormResponse(canceled=True)
        if selection is None:
            return MessageFormResponse(canceled=True)
        return MessageFormResponse(selection=selection)


class ConsoleModalForm(_ConsoleFormBase, ModalForm):
    def __init__(self, console: Console, settings: UISettings):
        super().__init__(console, settings)
        # (produces_value, step); icons only print.
        self._steps: list[tuple[bool, Callable[[], Any]]] = []

    def add_toggle(self, label: str, default_value: bool | None = None) -> None:
        default = bool(default_value)
        self._steps.append((True, lambda: Confirm.ask(label, console=self._console, default=default)))

    def add_slider(
        self,
        label: str,
        minimum: float,
        maximum: float,
        step: float,
        default_value: float | None = None,
    ) -> None:
        default = minimum if default_value is None else default_value
        self._steps.append((True, lambda: self._ask_slider(label, minimum, maximum, step, default)))

    def add_dropdown(
        self,
        label: str,
        options: Sequence[str],
        default_index: int | None = None,
    ) -> None:
        items = list(options)
        if not items:
            raise ValueError(f"Dropdown {label!r} has no options")
        if default_index is not None and not 0 <= default_index < len(items):
            raise ValueError(
                f"Dropdown {label!r} default index {default_index} is out of range"
            )
        self._steps.append((True, lambda: self._ask_dropdown(label, items, default_index)))

    def add_text_field(
        self,
        label: str,
        placeholder: str = "",
        default_value: str | None = None,
    ) -> None:
        hint = f"{label} [dim]({placeholder})[/dim]" if placeholder else label
        self._steps.append(
            (True, lambda: Prompt.ask(hint, console=self._console, default=default_value or ""))
        )

    def add_icon(self, path: str) -> None:
        self._steps.append((False, lambda: self._console.print(f"[dim]icon: {path}[/dim]")))

    async def show(self, identity: Any) -> ModalFormResponse:
        return await self._interact(lambda: self._prompt(identity))

    def _prompt(self, identity: Any) -> ModalFormResponse:
        self._render_header(identity)
        values: list[Any] = []
        try:
            for produces_value, step in self._steps:
                value = step()
                if produces_value:
                    values.append(value)
        except (EOFError, KeyboardInterrupt):
            return ModalFormResponse(canceled=True)
        return ModalFormResponse(values=tuple(values))

    def _ask_slider(
        self, label: str, minimum: float, maximum: float, step: float, default: float
    ) -> float:
        while True:
            value = FloatPrompt.ask(
                f"{label} [dim]({minimum}..{maximum}, step {step})[/dim]",
                console=self._console,
                default=default,
            )
            offset = (value - minimum) / step
            if minimum <= value <= maximum and abs(offset - round(offset)) < 1e-9:
                return int(value) if float(value).is_integer() else value
            self._console.print("[red]Value out of range or off step[/red]")

    def _ask_dropdown(self, label: str, options: list[str], default_index: int | None) -> int:
        self._console.print(f"[bold]{label}[/bold]")
        self._print_options(options)
        choices = [str(position) for position in range(1, len(options) + 1)]
        default = str(default_index + 1) if default_index is not None else None
        kwargs: dict[str, Any] = {}
        if default is not None:
            kwargs["default"] = default
        answer = Prompt.ask(
            "Option", console=self._console, choices=choices, show_choices=False, **kwargs
        )
        return int(answer) - 1
