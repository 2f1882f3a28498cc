from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from ..config.prompt_config import PromptConfig
from ..core.errors import PromptConfigError
from .field import (
    Condition,
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
    from ..terminal.base import TerminalIO
    from .executor import InputProvider

FormValidator = Callable[[FormResult], None]


class FormBuilder:
    """Chainable description of a form; nothing is asked until :meth:`run`.

    ``condition`` and ``result_title`` modify the most recently added field.
    """

    def __init__(self, title: str = "", config: Optional[PromptConfig] = None) -> None:
        self.fields: list[FormField] = []
        self.form_title = title
        self.form_config = config
        self.validator: Optional[FormValidator] = None

    def add_confirm(self, key: str, prompt: str, default: bool = False) -> "FormBuilder":
        return self._add(ConfirmField(key=key, prompt=prompt, default=default))

    def add_input(
        self,
        key: str,
        prompt: str,
        default: str = "",
        validator: Optional[Validator] = None,
    ) -> "FormBuilder":
        return self._add(InputField(key=key, prompt=prompt, default=default, validator=validator))

    def add_password(
        self, key: str, prompt: str, validator: Optional[Validator] = None
    ) -> "FormBuilder":
        return self._add(PasswordField(key=key, prompt=prompt, validator=validator))

    def add_select(
        self, key: str, prompt: str, options: Iterable[str], default_index: int = 0
    ) -> "FormBuilder":
        return self._add(
            SelectField(key=key, prompt=prompt, options=list(options), default_index=default_index)
        )

    def add_multiselect(
        self,
        key: str,
        prompt: str,
        options: Iterable[str],
        default_selected: Optional[Iterable[int]] = None,
    ) -> "FormBuilder":
        return self._add(
            MultiSelectField(
                key=key,
                prompt=prompt,
                options=list(options),
                default_selected=list(default_selected or []),
            )
        )

    def add_form(self, key: str, prompt: str, form: "FormBuilder") -> "FormBuilder":
        return self._add(NestedFormField(key=key, prompt=prompt, form=form))

    def condition(self, condition: Condition) -> "FormBuilder":
        return self._update_last(condition=condition)

    def result_title(self, title: str) -> "FormBuilder":
        return self._update_last(result_title=title)

    def title(self, text: str) -> "FormBuilder":
        self.form_title = text
        return self

    def config(self, config: PromptConfig) -> "FormBuilder":
        self.form_config = config
        return self

    def validate(self, validator: FormValidator) -> "FormBuilder":
        self.validator = validator
        return self

    def run(
        self,
        terminal: Optional["TerminalIO"] = None,
        provider: Optional["InputProvider"] = None,
    ) -> FormResult:
        from .executor import ask_form

        return ask_form(self, terminal=terminal, provider=provider)

    def _add(self, field: FormField) -> "FormBuilder":
        self.fields.append(field)
        return self

    def _update_last(self, **changes) -> "FormBuilder":
        if not self.fields:
            raise PromptConfigError("add a field before setting its options")
        self.fields[-1] = replace(self.fields[-1], **changes)
        return self
