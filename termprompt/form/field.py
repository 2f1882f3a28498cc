from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Union

from .result import FormResult

if TYPE_CHECKING:
    from .builder import FormBuilder

Condition = Callable[[FormResult], bool]
Validator = Callable[[str], None]


@dataclass(frozen=True)
class ConfirmField:
    key: str
    prompt: str
    default: bool = False
    condition: Optional[Condition] = None
    result_title: Optional[str] = None


@dataclass(frozen=True)
class InputField:
    key: str
    prompt: str
    default: str = ""
    validator: Optional[Validator] = None
    condition: Optional[Condition] = None
    result_title: Optional[str] = None


@dataclass(frozen=True)
class PasswordField:
    key: str
    prompt: str
    validator: Optional[Validator] = None
    condition: Optional[Condition] = None
    result_title: Optional[str] = None


@dataclass(frozen=True)
class SelectField:
    key: str
    prompt: str
    options: list[str] = field(default_factory=list)
    default_index: int = 0
    condition: Optional[Condition] = None
    result_title: Optional[str] = None


@dataclass(frozen=True)
class MultiSelectField:
    key: str
    prompt: str
    options: list[str] = field(default_factory=list)
    default_selected: list[int] = field(default_factory=list)
    condition: Optional[Condition] = None
    result_title: Optional[str] = None


@dataclass(frozen=True)
class NestedFormField:
    key: str
    prompt: str
    form: Optional["FormBuilder"] = None
    condition: Optional[Condition] = None
    result_title: Optional[str] = None


FormField = Union[
    ConfirmField,
    InputField,
    PasswordField,
    SelectField,
    MultiSelectField,
    NestedFormField,
]
