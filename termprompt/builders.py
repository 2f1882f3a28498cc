"""Fluent builders over the request records.

Each builder collects settings and produces a frozen request with
``build()``; ``run()`` builds and executes in one go::

    name = Input().prompt("Project name").default_value("demo").run()
"""

from __future__ import annotations

from typing import Generic, Iterable, Optional, TypeVar

from .config.prompt_config import PromptConfig
from .terminal.base import TerminalIO
from .widgets.confirm import ConfirmRequest
from .widgets.editor import Validator
from .widgets.multiselect import MultiSelectRequest
from .widgets.select import SelectRequest
from .widgets.text import InputRequest, PasswordRequest

R = TypeVar("R")
B = TypeVar("B", bound="_Builder")


class _Builder(Generic[R]):
    def __init__(self) -> None:
        self._prompt = ""
        self._config: Optional[PromptConfig] = None
        self._result_title: Optional[str] = None

    def prompt(self: B, message: str) -> B:
        self._prompt = message
        return self

    def config(self: B, config: PromptConfig) -> B:
        self._config = config
        return self

    def result_title(self: B, title: str) -> B:
        self._result_title = title
        return self

    def build(self) -> R:
        raise NotImplementedError

    def run(self, terminal: Optional[TerminalIO] = None):
        return self.build().run(terminal)


class Confirm(_Builder[ConfirmRequest]):
    def __init__(self) -> None:
        super().__init__()
        self._default = False

    def default(self, value: bool) -> "Confirm":
        self._default = value
        return self

    def build(self) -> ConfirmRequest:
        return ConfirmRequest(
            message=self._prompt,
            default=self._default,
            config=self._config,
            result_title=self._result_title,
        )


class Select(_Builder[SelectRequest]):
    def __init__(self) -> None:
        super().__init__()
        self._options: list[str] = []
        self._default = 0
        self._cyclic = False

    def options(self, options: Iterable[str]) -> "Select":
        self._options = list(options)
        return self

    def default(self, index: int) -> "Select":
        self._default = index
        return self

    def cyclic(self, enabled: bool = True) -> "Select":
        self._cyclic = enabled
        return self

    def build(self) -> SelectRequest:
        return SelectRequest(
            message=self._prompt,
            options=list(self._options),
            default=self._default,
            config=self._config,
            result_title=self._result_title,
            cyclic=self._cyclic,
        )


class MultiSelect(_Builder[MultiSelectRequest]):
    def __init__(self) -> None:
        super().__init__()
        self._options: list[str] = []
        self._defaults: list[int] = []
        self._cyclic = False

    def options(self, options: Iterable[str]) -> "MultiSelect":
        self._options = list(options)
        return self

    def defaults(self, indices: Iterable[int]) -> "MultiSelect":
        self._defaults = list(indices)
        return self

    def cyclic(self, enabled: bool = True) -> "MultiSelect":
        self._cyclic = enabled
        return self

    def build(self) -> MultiSelectRequest:
        return MultiSelectRequest(
            message=self._prompt,
            options=list(self._options),
            defaults=list(self._defaults),
            config=self._config,
            result_title=self._result_title,
            cyclic=self._cyclic,
        )


class Input(_Builder[InputRequest]):
    def __init__(self) -> None:
        super().__init__()
        self._default = ""
        self._placeholder = ""
        self._validator: Optional[Validator] = None

    def default_value(self, value: str) -> "Input":
        self._default = value
        return self

    def placeholder(self, text: str) -> "Input":
        self._placeholder = text
        return self

    def validate(self, validator: Validator) -> "Input":
        self._validator = validator
        return self

    def build(self) -> InputRequest:
        return InputRequest(
            message=self._prompt,
            default=self._default,
            validator=self._validator,
            placeholder=self._placeholder,
            config=self._config,
            result_title=self._result_title,
        )


class Password(_Builder[PasswordRequest]):
    def __init__(self) -> None:
        super().__init__()
        self._default = ""
        self._validator: Optional[Validator] = None

    def default_value(self, value: str) -> "Password":
        self._default = value
        return self

    def validate(self, validator: Validator) -> "Password":
        self._validator = validator
        return self

    def build(self) -> PasswordRequest:
        return PasswordRequest(
            message=self._prompt,
            default=self._default,
            validator=self._validator,
            config=self._config,
            result_title=self._result_title,
        )
