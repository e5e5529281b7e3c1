"""Configuration helpers."""

from simple_ui.common.config.settings import UISettings, load_settings

__all__ = ["UISettings", "load_settings"]
