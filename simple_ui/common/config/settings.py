"""Runtime settings for the bundled presentation backends."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from simple_ui.common.config.env import parse_bool_env, parse_str_env

CANCEL_KEYWORD_ENV = "SIMPLE_UI_CANCEL_KEYWORD"
SHOW_IDENTITY_ENV = "SIMPLE_UI_SHOW_IDENTITY"


class UISettings(BaseModel):
    """Knobs read by the console backend."""

    cancel_keyword: str = Field(
        default="q",
        min_length=1,
        description="Answer that dismisses a choice or message form",
    )
    show_identity: bool = Field(
        default=True,
        description="Render the requesting identity as the panel subtitle",
    )

    model_config = ConfigDict(extra="ignore", frozen=True)


def load_settings(env: Mapping[str, str] | None = None) -> UISettings:
    """Build settings from ``SIMPLE_UI_*`` environment variables."""
    source = os.environ if env is None else env
    values: dict[str, object] = {}
    cancel_keyword = parse_str_env(source.get(CANCEL_KEYWORD_ENV))
    if cancel_keyword is not None:
        values["cancel_keyword"] = cancel_keyword
    show_identity = parse_bool_env(source.get(SHOW_IDENTITY_ENV))
    if show_identity is not None:
        values["show_identity"] = show_identity
    return UISettings(**values)
