"""Runs a :class:`FormBuilder` field by field.

Text and password fields go through an :class:`InputProvider` so callers can
swap in their own line editor; every other field kind is answered by the
built-in widgets. Each field failure is wrapped in ``FormFieldError`` except
cancellation, which propagates untouched so the caller can tell "user hit
Ctrl-C" apart from "something broke".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol

from ..config.prompt_config import PromptConfig, with_result_title
from ..core.errors import FormFieldError, FormValidationError, PromptCancelled, PromptConfigError
from ..core.session_log import log_exception, log_prompt_event
from ..terminal.base import StdTerminal, TerminalIO
from ..widgets.confirm import ConfirmRequest
from ..widgets.editor import display_width
from ..widgets.multiselect import MultiSelectRequest
from ..widgets.select import SelectRequest
from ..widgets.text import ask_input, ask_password
from .field import (
    ConfirmField,
    FormField,
    InputField,
    MultiSelectField,
    NestedFormField,
    PasswordField,
    SelectField,
    Validator,
)
from .result import FormResult

if TYPE_CHECKING:
    from .builder import FormBuilder

SEPARATOR_CHAR = "─"
SEPARATOR_WIDTH = 72


class InputProvider(Protocol):
    def ask_input(
        self,
        message: str,
        default: str,
        validator: Optional[Validator],
        config: Optional[PromptConfig],
    ) -> str: ...

    def ask_password(
        self,
        message: str,
        validator: Optional[Validator],
        config: Optional[PromptConfig],
    ) -> str: ...


ProviderFactory = Callable[[TerminalIO], InputProvider]


class WidgetInputProvider:
    """Answers text fields with the package's own line editor."""

    def __init__(self, terminal: TerminalIO) -> None:
        self.terminal = terminal

    def ask_input(self, message, default, validator, config) -> str:
        return ask_input(message, default, validator, config=config, terminal=self.terminal)

    def ask_password(self, message, validator, config) -> str:
        return ask_password(message, validator, config=config, terminal=self.terminal)


_default_provider_factory: Optional[ProviderFactory] = None


def set_default_input_provider(factory: Optional[ProviderFactory]) -> None:
    global _default_provider_factory
    _default_provider_factory = factory


def get_default_input_provider() -> Optional[ProviderFactory]:
    return _default_provider_factory


def separator_lines(title: str, suffix: str, is_main_form: bool) -> list[str]:
    text = f"{title} {suffix.capitalize()}"
    width = display_width(text)
    if is_main_form:
        remaining = max(SEPARATOR_WIDTH - width, 0)
        left = remaining // 2
        rule = SEPARATOR_CHAR * SEPARATOR_WIDTH
        return [rule, " " * left + text + " " * (remaining - left), rule]
    remaining = max(SEPARATOR_WIDTH - width - 2, 0)
    left = remaining // 2
    return [SEPARATOR_CHAR * left + f" {text} " + SEPARATOR_CHAR * (remaining - left)]


class FormExecutor:
    def __init__(
        self,
        terminal: Optional[TerminalIO] = None,
        config: Optional[PromptConfig] = None,
        provider: Optional[InputProvider] = None,
    ) -> None:
        self.terminal = terminal or StdTerminal()
        self.config = config
        self.provider = provider

    def execute(self, builder: "FormBuilder") -> FormResult:
        return self._execute(builder, level=0)

    def _execute(self, builder: "FormBuilder", level: int) -> FormResult:
        title = builder.form_title
        is_main_form = level == 0
        if title:
            self._print_separator(title, "start", is_main_form)

        result = FormResult()
        for field in builder.fields:
            if field.condition is not None and not field.condition(result):
                log_prompt_event("form", "field.skip", {"key": field.key})
                continue
            try:
                value = self._execute_field(field, level)
            except PromptCancelled as exc:
                exc.add_note(f"form field: {field.key}")
                raise
            except Exception as exc:
                log_exception("form", exc)
                raise FormFieldError(field.key, exc) from exc
            result.set(field.key, value)

        if title:
            self._print_separator(title, "end", is_main_form)

        if builder.validator is not None:
            try:
                builder.validator(result)
            except ValueError as exc:
                log_prompt_event("form", "form.invalid", {"error": str(exc)})
                raise FormValidationError(f"form validation failed: {exc}") from exc
        return result

    def _execute_field(self, field: FormField, level: int):
        terminal = self.terminal
        match field:
            case ConfirmField():
                request = ConfirmRequest(
                    message=field.prompt,
                    default=field.default,
                    config=self.config,
                    result_title=field.result_title,
                )
                return request.run(terminal)
            case InputField():
                return self._provider().ask_input(
                    field.prompt, field.default, field.validator, self._field_config(field)
                )
            case PasswordField():
                return self._provider().ask_password(
                    field.prompt, field.validator, self._field_config(field)
                )
            case SelectField():
                request = SelectRequest(
                    message=field.prompt,
                    options=field.options,
                    default=field.default_index,
                    config=self.config,
                    result_title=field.result_title,
                )
                return request.run(terminal)
            case MultiSelectField():
                request = MultiSelectRequest(
                    message=field.prompt,
                    options=field.options,
                    defaults=field.default_selected,
                    config=self.config,
                    result_title=field.result_title,
                )
                return request.run(terminal)
            case NestedFormField():
                if field.form is None or not field.form.fields:
                    raise PromptConfigError(f"nested form {field.key!r} has no fields")
                return self._execute(field.form, level + 1)
        raise PromptConfigError(f"unknown field type: {type(field).__name__}")

    def _field_config(self, field: FormField) -> Optional[PromptConfig]:
        if not field.result_title:
            return self.config
        return with_result_title(self.config or PromptConfig(), field.result_title)

    def _provider(self) -> InputProvider:
        if self.provider is not None:
            return self.provider
        factory = get_default_input_provider()
        if factory is None:
            raise PromptConfigError("no input provider registered for text fields")
        return factory(self.terminal)

    def _print_separator(self, title: str, suffix: str, is_main_form: bool) -> None:
        terminal = self.terminal
        terminal.reset_format()
        terminal.println("")
        for line in separator_lines(title, suffix, is_main_form):
            terminal.println(line)
        terminal.println("")
        terminal.reset_format()


def ask_form(
    builder: "FormBuilder",
    *,
    terminal: Optional[TerminalIO] = None,
    provider: Optional[InputProvider] = None,
) -> FormResult:
    return FormExecutor(terminal=terminal, config=builder.form_config, provider=provider).execute(
        builder
    )
