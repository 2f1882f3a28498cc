"""Multi-field forms composed from the prompt widgets."""

from .builder import FormBuilder
from .executor import (
    FormExecutor,
    InputProvider,
    WidgetInputProvider,
    ask_form,
    get_default_input_provider,
    set_default_input_provider,
)
from .field import (
    ConfirmField,
    FormField,
    InputField,
    MultiSelectField,
    NestedFormField,
    PasswordField,
    SelectField,
)
from .result import FormResult

set_default_input_provider(WidgetInputProvider)

__all__ = [
    "ConfirmField",
    "FormBuilder",
    "FormExecutor",
    "FormField",
    "FormResult",
    "InputField",
    "InputProvider",
    "MultiSelectField",
    "NestedFormField",
    "PasswordField",
    "SelectField",
    "WidgetInputProvider",
    "ask_form",
    "get_default_input_provider",
    "set_default_input_provider",
]
