from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class FormVariant(str, Enum):
    CHOICE_LIST = "choice_list"
    STRUCTURED_FIELDS = "structured_fields"
    TWO_BUTTON_MESSAGE = "two_button_message"


@dataclass(frozen=True)
class Button:
    text: str
    icon: str | None = None  # ignored by two-button messages


@dataclass(frozen=True)
class Toggle:
    kind: ClassVar[str] = "toggle"

    label: str
    default_value: bool | None = None


@dataclass(frozen=True)
class Slider:
    kind: ClassVar[str] = "slider"

    label: str
    minimum: float
    maximum: float
    step: float
    default_value: float | None = None


@dataclass(frozen=True)
class Dropdown:
    kind: ClassVar[str] = "dropdown"

    label: str
    options: tuple[str, ...]
    default_index: int | None = None  # None is "no default", not option 0


@dataclass(frozen=True)
class TextField:
    kind: ClassVar[str] = "textfield"

    label: str
    placeholder: str = ""
    default_value: str | None = None


@dataclass(frozen=True)
class Icon:
    kind: ClassVar[str] = "icon"

    path: str


FieldDescriptor = Union[Toggle, Slider, Dropdown, TextField, Icon]


@dataclass(frozen=True)
class ActionFormResponse:
    selection: int | None = None
    canceled: bool = False


@dataclass(frozen=True)
class MessageFormResponse:
    selection: int | None = None  # 0 = primary, 1 = secondary
    canceled: bool = False


@dataclass(frozen=True)
class ModalFormResponse:
    values: tuple[Any, ...] | None = None  # one per value-producing field
    canceled: bool = False


SelectionResponse = Union[ActionFormResponse, MessageFormResponse]

