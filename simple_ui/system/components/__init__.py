from simple_ui.system.components.console import ConsoleBackend

__all__ = ["ConsoleBackend"]
